"""Rule reporting and plotting."""
