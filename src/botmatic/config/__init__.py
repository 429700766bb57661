"""Configuração do cliente Botmatic (settings e logging)."""
