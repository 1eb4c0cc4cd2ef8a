"""Wire models of the admin API.

Plain pydantic data-transfer records; they know nothing about HTTP or the CLI.
"""
