"""Static naming tables for well-known DeFi event shapes.

- `KNOWN_EVENT_FIELD_NAMES`: event name -> type fingerprint -> field names.
  The fingerprint is the comma-joined parameter type list; only exact matches
  are used, so the same event name can carry many shapes (AMM, aggregator,
  bridge, vault conventions).
- `TYPE_BASED_FIELD_NAMES`: type token -> base field name, used by the
  heuristic tier when nothing better is known.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

FieldNameTable = Mapping[str, Mapping[str, tuple[str, ...]]]


def _freeze(table: dict[str, dict[str, list[str]]]) -> FieldNameTable:
    return MappingProxyType(
        {event: MappingProxyType({fp: tuple(names) for fp, names in shapes.items()}) for event, shapes in table.items()}
    )


KNOWN_EVENT_FIELD_NAMES: FieldNameTable = _freeze({
    "Transfer": {
        "address,address,uint256": ["from", "to", "value"],
    },
    "Approval": {
        "address,address,uint256": ["owner", "spender", "value"],
        "address,address,address,uint160,uint48": ["owner", "token", "spender", "amount", "expiration"],
    },
    "Deposit": {
        "address,uint256": ["dst", "wad"],
        "address,uint256,uint256": ["user", "amount", "timestamp"],
        "address,address,uint256,uint256": ["caller", "owner", "assets", "shares"],
        "address,address,address,uint256,uint256": ["sender", "receiver", "owner", "assets", "shares"],
    },
    "Withdraw": {
        "uint256": ["tvl"],
        "address,uint256": ["provider", "value"],
        "address,uint256,uint256": ["provider", "amountBorrowed", "amountCollateral"],
        "address,address,address,uint256,uint256": ["sender", "receiver", "owner", "assets", "shares"],
    },
    "Withdrawal": {
        "address,uint256": ["src", "wad"],
    },
    "Withdrawn": {
        "address,uint256,uint256": ["user", "poolid", "amount"],
    },
    "Swap": {
        "address,uint256,uint256,uint256,uint256,address": ["sender", "amount0In", "amount1In", "amount0Out", "amount1Out", "to"],
        "address,uint256,uint256,uint256,uint256,address,uint256": ["sender", "amount0In", "amount1In", "amount0Out", "amount1Out", "to", "feeInPrecision"],
        "address,address,int256,int256,uint160,uint128,int24": ["sender", "recipient", "amount0", "amount1", "sqrtPriceX96", "liquidity", "tick"],
        "address,address,int256,int256,uint160,uint128": ["sender", "recipient", "amount0", "amount1", "sqrtPriceX96", "liquidity"],
        "address,address,int256,int256,uint160,uint128,int24,uint256": ["sender", "recipient", "amount0", "amount1", "sqrtPriceX96", "liquidity", "tick", "timestamp"],
        "address,address,int256,int256,uint160,uint128,int24,uint128,uint128": ["sender", "recipient", "amount0", "amount1", "sqrtPriceX96", "liquidity", "tick", "protocolFeesToken0", "protocolFeesToken1"],
        "address,address,address,uint256,uint256,uint256,uint256": ["pool", "tokenIn", "tokenOut", "amountIn", "amountOut", "swapFeePercentage", "swapFeeAmount"],
        "address,uint256,uint256": ["user", "amountIn", "amountOut"],
        "address,uint256,address,uint256,address,int256,uint32": ["sender", "inputAmount", "inputToken", "amountOut", "outputToken", "slippage", "referralCode"],
        "address,address,uint256,uint256": ["sender", "recipient", "amountIn", "amountOut"],
        "bool,uint256,uint256,address": ["status", "amountIn", "amountOut", "to"],
        "bytes32,address,address,uint256,uint256": ["poolId", "tokenIn", "tokenOut", "amountIn", "amountOut"],
        "bytes32,address,int128,int128,uint160,uint128,int24,uint24": ["id", "sender", "amount0", "amount1", "sqrtPriceX96", "liquidity", "tick", "fee"],
        "string,address": ["aggregatorId", "sender"],
    },
    "Swapped": {
        "address,address,address,address,uint256,uint256": ["sender", "srcToken", "dstToken", "dstReceiver", "spentAmount", "returnAmount"],
    },
    "SwapAndIncreaseLiquidity": {
        "address,uint256,uint128,uint256,uint256": ["nfpm", "tokenId", "liquidity", "amount0", "amount1"],
    },
    "SwapFeePercentageChanged": {
        "uint256": ["swapFeePercentage"],
    },
    "Stake": {
        "address,address,uint256": ["caller", "recipient", "amount"],
    },
    "AddLiquidity": {
        "address,uint256[],uint256": ["provider", "tokenAmounts", "lpTokenMinted"],
        "address,uint256[],uint256,uint256": ["provider", "tokenAmounts", "minMintAmount", "deadline"],
        "address,uint256[3],uint256[3],uint256,uint256": ["provider", "tokenAmounts", "fees", "invariant", "tokenSupply"],
        "address,uint256,uint256,uint256,uint256,address": ["sender", "amount0", "amount1", "liquidity", "timestamp", "to"],
        "address,uint256[],uint256[],uint256,uint256": ["provider", "tokenAmounts", "fees", "invariant", "tokenSupply"],
        "address,uint256[2],uint256[2],uint256,uint256": ["provider", "tokenAmounts", "fees", "invariant", "tokenSupply"],
    },
    "Bought": {
        "address,address,uint256,uint256": ["fromAsset", "toAsset", "amountSold", "receivedAmount"],
    },
    "BebopOrder": {
        "uint128": ["eventId"],
    },
    "BKBridge": {
        "uint256,bytes32,address,address,address,address,address,uint256,uint256,uint256,uint256": ["orderStatus", "transferId", "vaultReceiver", "sender", "receiver", "srcToken", "dstToken", "srcChainId", "dstChainId", "amount", "timestamp"],
    },
    "CallWithContext": {
        "address,bytes19,address,address,bytes4": ["caller", "onBehalfOfAddressPrefix", "onBehalfOfAccount", "targetContract", "selector"],
    },
    "ClaimAdminFee": {
        "address,uint256": ["admin", "tokens"],
    },
    "clientData": {
        "bytes": ["clientData"],
    },
    "Collect": {
        "address,address,int24,int24,uint128,uint128": ["owner", "recipient", "tickLower", "tickUpper", "amount0", "amount1"],
        "uint256,address,uint256,uint256": ["tokenId", "recipient", "amount0", "amount1"],
    },
    "DaiToUsds": {
        "address,address,uint256": ["caller", "usr", "wad"],
    },
    "DecreaseLiquidity": {
        "uint256,uint128,uint256,uint256": ["tokenId", "liquidity", "amount0", "amount1"],
    },
    "DeductFees": {
        "address,uint256,address,(address,address,address,uint256,uint256,uint256,uint256,uint256,uint256,uint64,uint8)": ["nfpm", "tokenId", "userAddress", "data"],
    },
    "EthPurchase": {
        "address,uint256,uint256": ["buyer", "tokensSold", "ethBought"],
    },
    "Exchange": {
        "address,uint256,address": ["pair", "amountOut", "output"],
        "address,address,address[11],uint256[5][5],address[5],uint256,uint256": ["sender", "receiver", "route", "swapParams", "pools", "amountIn", "amountOut"],
    },
    "Exit": {
        "address,address,uint256": ["caller", "usr", "wad"],
    },
    "Fee": {
        "address,uint256,uint256,address[],uint256[],bool": ["token", "totalAmount", "totalFee", "recipients", "amounts", "isBps"],
    },
    "FeesCollected": {
        "address,address,uint256,uint256": ["token", "integrator", "integratorFee", "lifiFee"],
    },
    "FlashLoan": {
        "address,address,uint256,uint256": ["recipient", "token", "amount", "feeAmount"],
        "address,address,uint256,uint256,bytes": ["recipient", "token", "amount", "feeAmount", "data"],
    },
    "FulfilledOrder": {
        "((address,uint256)[],(address,uint256)[],(address,uint256,bytes),address,address),address,address": ["order", "caller", "recipient"],
    },
    "IncreaseLiquidity": {
        "uint256,uint128,uint256,uint256": ["tokenId", "liquidity", "amount0", "amount1"],
    },
    "Join": {
        "address,address,uint256": ["caller", "usr", "wad"],
    },
    "LOG_SWAP": {
        "address,address,address,uint256,uint256": ["caller", "tokenIn", "tokenOut", "tokenAmountIn", "tokenAmountOut"],
    },
    "Migrated": {
        "address,address,address,uint256,uint256": ["user", "oldToken", "newToken", "oldAmount", "newAmount"],
    },
    "OrderFilled": {
        "bytes32,uint256": ["orderHash", "remainingAmount"],
    },
    "RemoveLiquidity": {
        "address,uint256,uint256[]": ["provider", "lpTokenAmount", "minAmounts"],
        "address,uint256,uint256[],uint256": ["provider", "lpTokenAmount", "minAmounts", "deadline"],
        "address,uint256,uint256[],uint256,uint256": ["provider", "lpTokenAmount", "minAmounts", "deadline", "timestamp"],
        "address,uint256[],uint256[],uint256": ["provider", "tokenAmounts", "fees", "tokenSupply"],
    },
    "RemoveLiquidityOne": {
        "address,uint256,uint256,uint256[]": ["provider", "lpTokenAmount", "tokenIndex", "minAmount"],
        "address,int128,uint256,uint256,uint256": ["provider", "tokenId", "tokenAmount", "coinAmount", "tokenSupply"],
        "address,uint256,uint256,uint256": ["provider", "tokenAmount", "coinAmount", "tokenSupply"],
        "address,uint256,uint256": ["provider", "tokenAmount", "coinAmount"],
    },
    "RemoveLiquidityImbalance": {
        "address,uint256[],uint256[],uint256,uint256": ["provider", "tokenAmounts", "fees", "invariant", "tokenSupply"],
    },
    "Repay": {
        "address,uint256,uint256,uint256,uint256,uint256,uint256": ["user", "stateCollateralUsed", "borrowedFromStateCollateral", "userCollateral", "userCollateralUsed", "borrowedFromUserCollateral", "userBorrowed"],
        "address,uint256,uint256": ["user", "collateralDecrease", "loanDecrease"],
    },
    "RewardPaid": {
        "address,uint256": ["user", "reward"],
    },
    "TokenExchange": {
        "address,int128,uint256,int128,uint256": ["buyer", "soldId", "tokensSold", "boughtId", "tokensBought"],
        "address,uint256,uint256,uint256,uint256": ["buyer", "soldId", "tokensSold", "boughtId", "tokensBought"],
        "address,uint256,uint256,uint256,uint256,uint256,uint256": ["buyer", "soldId", "tokensSold", "boughtId", "tokensBought", "fees", "packedPriceScale"],
    },
    "TokenExchangeUnderlying": {
        "address,int128,uint256,int128,uint256": ["buyer", "soldId", "tokensSold", "boughtId", "tokensBought"],
        "address,uint256,uint256,uint256,uint256": ["buyer", "soldId", "tokensSold", "boughtId", "tokensBought"],
    },
    "TokenReturned": {
        "address,uint256": ["token", "amount"],
    },
    "TokensClaimed": {
        "address,uint256": ["pool", "cncAmount"],
    },
    "TransitSwapped": {
        "address,address,address,uint256,uint256,uint256,string": ["srcToken", "dstToken", "dstReceiver", "amount", "returnAmount", "toChainID", "channel"],
    },
    "UpdateEMA": {
        "uint256,uint256,uint128,uint256": ["shortEMA", "longEMA", "lastBlockVolume", "skipBlock"],
    },
    "UserState": {
        "address,uint256,uint256,int256,int256,uint256": ["user", "collateral", "debt", "n1", "n2", "liquidationDiscount"],
        "address,uint256,uint256,int256,int256,uint256,uint256": ["user", "collateral", "debt", "n1", "n2", "liquidationDiscount", "timestamp"],
    },
    "UsdsToDai": {
        "address,address,uint256": ["caller", "usr", "wad"],
    },
    "UpdateLiquidityLimit": {
        "address,uint256,uint256,uint256,uint256": ["user", "originalBalance", "originalSupply", "workingBalance", "workingSupply"],
    },
    "Mint": {
        "address,uint256,uint256": ["minter", "tokenId", "amount"],
        "address,address,uint256": ["operator", "to", "tokenId"],
        "address,address,uint256,uint256": ["operator", "to", "tokenId", "amount"],
        "address,address,uint256,uint256,bytes": ["operator", "to", "tokenId", "amount", "data"],
        "address,address,uint256,uint256,uint256": ["to", "operator", "amount", "tokenId", "fees"],
        "address,address,int24,int24,uint128,uint256,uint256": ["sender", "owner", "tickLower", "tickUpper", "amount", "amount0", "amount1"],
    },
    "Burn": {
        "address,uint256": ["tokenId", "amount"],
        "address,address,uint256": ["operator", "from", "tokenId"],
        "address,address,uint256,uint256": ["operator", "from", "tokenId", "amount"],
        "address,address,uint256,uint256,uint256": ["operator", "from", "amount", "tokenId", "fees"],
        "address,address,uint256,uint256,bytes": ["operator", "from", "tokenId", "amount", "data"],
        "address,int24,int24,uint128,uint256,uint256": ["owner", "tickLower", "tickUpper", "amount", "amount0", "amount1"],
    },
    "PointsCorrectionUpdated": {
        "address,int256": ["account", "pointsCorrection"],
    },
    "PriceUpdate": {
        "uint256,uint256": ["oldPrice", "newPrice"],
        "address,uint256,uint256": ["token", "oldPrice", "newPrice"],
    },
    "Trade": {
        "address,address,uint256,uint256": ["trader", "subject", "buyAmount", "sellAmount"],
        "address,address,address,uint256,uint256,uint256,bytes": ["owner", "sellToken", "buyToken", "sellAmount", "buyAmount", "feeAmount", "orderUid"],
    },
    "Interaction": {
        "address,uint256,bytes4": ["target", "value", "selector"],
    },
    "Settlement": {
        "address": ["solver"],
    },
    "SetRate": {
        "uint256,uint256,uint256": ["rate", "rateMul", "time"],
    },
    "SellGem": {
        "address,uint256,uint256": ["owner", "value", "fee"],
    },
    "Sync": {
        "uint112,uint112": ["reserve0", "reserve1"],
        "uint256,uint256,uint256,uint256": ["vReserve0", "vReserve1", "reserve0", "reserve1"],
    },
    "ReserveDataUpdated": {
        "address,uint256,uint256,uint256,uint256,uint256": ["asset", "liquidityRate", "stableBorrowRate", "variableBorrowRate", "liquidityIndex", "variableBorrowIndex"],
    },
    "Wrap": {
        "address,uint256,uint256,bytes32": ["wrappedToken", "depositedUnderlying", "mintedShares", "bufferBalances"],
    },
    "Unwrap": {
        "address,uint256,uint256,bytes32": ["wrappedToken", "burnedShares", "withdrawnUnderlying", "bufferBalances"],
    },
    "DODOSwap": {
        "address,address,uint256,uint256,address,address": ["fromToken", "toToken", "fromAmount", "toAmount", "trader", "receiver"],
    },
    "VaultStatusCheck": {
        "address": ["vault"],
    },
    "WithdrawAndCollectAndSwap": {
        "address,uint256,address,uint256": ["nfpm", "tokenId", "token", "amount"],
    },
})


# No entry for scalar uint256/int256: those fall through to param{i}.
TYPE_BASED_FIELD_NAMES: Mapping[str, str] = MappingProxyType({
    "address": "account",
    "address[]": "accounts",
    "uint256[]": "amounts",
    "int256[]": "amounts",
    "bool": "status",
    "string": "name",
    "bytes": "data",
    "bytes32": "hash",
    "uint8": "decimals",
    "uint16": "feeBps",
    "uint32": "timestamp",
    "uint64": "timestamp",
    "uint128": "liquidity",
    "uint160": "sqrtPrice",
    "int24": "tick",
    "int128": "tokenId",
    "uint256[][]": "nestedAmounts",
})
