"""Host-independent core: selection codec, bookmark store, commands."""
