"""Access admin: user lifecycle backend (list, get, create, update, change password, block)."""
