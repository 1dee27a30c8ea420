"""azpay command-line interface."""
