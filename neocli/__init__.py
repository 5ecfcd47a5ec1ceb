"""Neo CLI - shell completion generation for the neo command line tool.

Turns the command tree of the neo CLI into ready-to-source completion
scripts for zsh, bash and fish.
"""
