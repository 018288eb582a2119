"""Network surfaces for the realiser: wire server and client, HTTP API, CLI."""
