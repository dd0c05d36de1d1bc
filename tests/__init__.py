"""
Test suite for the PingDirectory provider.

Contains:
- unit/: Unit tests with the Configuration API client mocked
- integration/: Tests against a running PingDirectory server
"""
