"""Wallet portfolio API: token holdings, balances and summaries for EVM wallets."""
