"""Allow running as: python -m gmi2md"""

from gmi2md.cli.main import main

main()
