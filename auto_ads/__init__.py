"""amp-auto-ads ad network configuration for automatic ad insertion."""
