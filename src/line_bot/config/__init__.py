"""Configuração do SDK: settings (env) e logging estruturado."""
