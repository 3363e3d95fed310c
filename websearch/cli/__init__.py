# =============================================================================
# websearch/cli/__init__.py -- CLI Module Overview
# =============================================================================
#
# Command-line tools for the websearch client, run with
# `python -m websearch.cli.<module>`.  All modules use argparse.  The
# provider factory is imported inside the runner so `--help` stays fast.
# =============================================================================

"""CLI tools for websearch.

- ``python -m websearch.cli.search`` -- run one web search and print the results.
"""
