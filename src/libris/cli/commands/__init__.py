# ABOUTME: Subcommands for the Libris CLI, one module per command.
# ABOUTME: Registered on the root group in libris.cli.
