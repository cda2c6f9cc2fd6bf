"""Constants, errors, configuration and logging shared by addrspec."""
