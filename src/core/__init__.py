"""Core: configuración, dominio y contratos. No conoce HTTP ni la CLI."""
