"""
Test package for the YoBit client.

Unit tests run against a recording mock transport, property tests use
Hypothesis, integration tests drive the aiohttp transport against a local
aiohttp.web server.
"""
