"""
sqlcup

Entry point for the SQL statement generator script.
"""

from sqlcup.cli.generator import main

if __name__ == "__main__":
    main()
