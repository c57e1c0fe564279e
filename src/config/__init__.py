"""Configuração do cliente LINE: settings e logging."""
