"""Integration tests for Gemtext to Markdown conversion.

These tests run the CLI against real files on disk and check the Markdown
written to standard output together with the log files it produces.

Use pytest marks to run only these tests:
    pytest tests/integration -m integration
"""
