# ABOUTME: Subcommand modules for the shelfscan CLI.
# ABOUTME: Each module defines one or more Click commands registered in shelfscan.cli.
