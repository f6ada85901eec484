"""Pure calculation functions; nothing in here reads settings, logs or prints."""
