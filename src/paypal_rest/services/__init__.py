"""Resource services built on PayPalClient."""
