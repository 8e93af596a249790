from __future__ import annotations

from collections.abc import Iterable, Mapping

from farmboard.domain.entities.token import TokenInfo


DEFAULT_TOKENS: tuple[TokenInfo, ...] = (
    TokenInfo(mint="So11111111111111111111111111111111111111112", symbol="SOL", decimals=9, name="Solana"),
    TokenInfo(mint="EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v", symbol="USDC", decimals=6, name="USD Coin"),
    TokenInfo(mint="Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB", symbol="USDT", decimals=6, name="Tether USD"),
    TokenInfo(mint="4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R", symbol="RAY", decimals=6, name="Raydium"),
    TokenInfo(mint="mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So", symbol="mSOL", decimals=9, name="Marinade SOL"),
)


class TokenRegistry:
    def __init__(self, tokens: Iterable[TokenInfo] = DEFAULT_TOKENS):
        self._by_symbol: dict[str, TokenInfo] = {}
        self._by_mint: dict[str, TokenInfo] = {}
        for token in tokens:
            self._by_symbol[token.symbol] = token
            self._by_mint[token.mint] = token

    @classmethod
    def with_overrides(cls, overrides: Mapping[str, Mapping]) -> TokenRegistry:
        tokens = {token.symbol: token for token in DEFAULT_TOKENS}
        for symbol, data in overrides.items():
            if not isinstance(data, Mapping) or not data.get("mint"):
                raise ValueError(f"Token override for '{symbol}' requires a mint.")
            tokens[symbol] = TokenInfo(
                mint=str(data["mint"]),
                symbol=symbol,
                decimals=int(data.get("decimals", 9)),
                name=data.get("name"),
            )
        return cls(tokens.values())

    def by_symbol(self, symbol: str | None) -> TokenInfo | None:
        if not symbol:
            return None
        return self._by_symbol.get(symbol)

    def by_mint(self, mint: str | None) -> TokenInfo | None:
        if not mint:
            return None
        return self._by_mint.get(mint)

    def mints(self) -> list[str]:
        return list(self._by_mint)
