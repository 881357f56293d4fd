"""Constantes criptográficas do esquema Ed25519 usado pelo Discord."""

PUBLIC_KEY_SIZE = 32  # bytes
SIGNATURE_SIZE = 64  # bytes
