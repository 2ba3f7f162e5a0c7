class InvalidParameter(ValueError):
    """Sponge parameters that cannot describe a Keccak-f[1600] instance."""
