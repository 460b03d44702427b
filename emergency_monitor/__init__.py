"""Núcleo de monitoramento de emergência: pessoas, falhas de energia e dispositivos pares."""

__version__ = "0.1.0"
