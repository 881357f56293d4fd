"""Limites do canal SMS."""

MAX_CONTENT_LENGTH = 1600  # caracteres (10 segmentos concatenados)

# E.164: "+" seguido de 8 a 15 dígitos ASCII, sem zero à esquerda
E164_PATTERN = r"^\+[1-9][0-9]{7,14}$"
