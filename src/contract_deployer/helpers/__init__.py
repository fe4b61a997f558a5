"""Web3, signer and artifact helpers used by the deployment runner."""
