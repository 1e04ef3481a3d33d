"""
Entry point for running matrix-contacts as a module: python -m matrix_contacts
"""

from matrix_contacts.cli.commands import app

if __name__ == "__main__":
    app()
