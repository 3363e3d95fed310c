"""Allow ``python -m websearch.cli`` execution."""

from websearch.cli.search import main

main()
