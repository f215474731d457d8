import time

import settings
from modules.config import (
    INFINITE_AMOUNT,
    MAX_TICK,
    MIN_TICK,
    POOL_FEE,
    POSITION_MANAGER_ABI,
    SWAP_ROUTER_ABI,
    TOKENS,
    USDC_OLD,
    WPHRS,
    ZENITH_POSITION_MANAGER,
    ZENITH_ROUTER,
    logger,
)
from modules.pharos_api_client import PharosApiClient
from modules.utils import check_min_balance, random_sleep
from modules.wallet import Wallet


def sort_pair(token_a, amount_a, token_b, amount_b):
    """Order a pool pair the way the pool stores it: token0 < token1."""
    if int(token_a, 16) < int(token_b, 16):
        return (token_a, amount_a), (token_b, amount_b)
    return (token_b, amount_b), (token_a, amount_a)


class Zenith(Wallet):
    DEADLINE = 600  # seconds

    def __init__(self, private_key, counter, proxy=None):
        super().__init__(private_key, counter)
        self.label += "Zenith |"
        self.router = self.get_contract(ZENITH_ROUTER, abi=SWAP_ROUTER_ABI)
        self.position_manager = self.get_contract(
            ZENITH_POSITION_MANAGER, abi=POSITION_MANAGER_ABI
        )
        self.proxy = proxy

    def claim_faucet(self):
        client = PharosApiClient(self.label, self.private_key, self.address, proxy=self.proxy)

        logger.info(f"{self.label} Claiming USDC")
        tx_hash = client.claim_zenith_faucet(USDC_OLD)
        logger.success(f"{self.label} USDC claimed | {self.tx_link(tx_hash)}")
        return True

    def get_deadline(self):
        return int(time.time()) + self.DEADLINE

    def build_swap_data(self, token_in, token_out, amount):
        """exactInputSingle((tokenIn, tokenOut, fee, recipient, amountIn, amountOutMinimum, sqrtPriceLimitX96))"""
        params = (
            self.to_checksum(token_in),
            self.to_checksum(token_out),
            POOL_FEE,
            self.address,
            amount,
            0,  # amountOutMinimum
            0,  # sqrtPriceLimitX96
        )
        calldata = self.router.encode_abi("exactInputSingle", args=[params])
        return self.web3.to_bytes(hexstr=calldata)

    def wrap(self, amount):
        """Top up WPHRS to `amount` by wrapping the missing part."""
        wphrs = self.get_contract(WPHRS)
        balance = wphrs.functions.balanceOf(self.address).call()

        if balance >= amount:
            return True

        missing = amount - balance
        contract_tx = wphrs.functions.deposit().build_transaction(
            self.get_tx_data(value=missing)
        )

        status = self.send_tx(
            contract_tx,
            tx_label=f"{self.label} wrap {missing / 10**18:.6f} PHRS",
        )
        if status:
            random_sleep(*settings.SLEEP_BETWEEN_ACTIONS)
        return status

    @check_min_balance
    def swap(self, token_out, amount):
        """Function: multicall(uint256 deadline, bytes[] data)"""
        symbol = next(key for key, value in TOKENS.items() if value == token_out)

        if not self.wrap(amount):
            return

        if not self.approve(
            WPHRS,
            self.router.address,
            INFINITE_AMOUNT,
            tx_label=f"{self.label} approve WPHRS",
            required=amount,
        ):
            return

        swap_data = self.build_swap_data(WPHRS, token_out, amount)
        contract_tx = self.router.functions.multicall(
            self.get_deadline(), [swap_data]
        ).build_transaction(self.get_tx_data())

        return self.send_tx(
            contract_tx,
            tx_label=f"{self.label} swap {amount / 10**18:.6f} PHRS > {symbol} [{self.tx_count}]",
        )

    @check_min_balance
    def add_liquidity(self, stable_symbol, phrs_amount, stable_amount):
        """Function: mint((token0, token1, fee, tickLower, tickUpper, amount0Desired, amount1Desired, amount0Min, amount1Min, recipient, deadline))"""
        stable = TOKENS[stable_symbol]
        balance, decimals, _ = self.get_token(stable)

        if balance < stable_amount:
            logger.warning(
                f"{self.label} Not enough {stable_symbol}: {balance / 10**decimals:.4f} < {stable_amount / 10**decimals:.4f}, skipping"
            )
            return

        if not self.wrap(phrs_amount):
            return

        spender = self.position_manager.address
        for token, amount, symbol in [
            (WPHRS, phrs_amount, "WPHRS"),
            (stable, stable_amount, stable_symbol),
        ]:
            if not self.approve(
                token,
                spender,
                INFINITE_AMOUNT,
                tx_label=f"{self.label} approve {symbol}",
                required=amount,
            ):
                return

        (token0, amount0), (token1, amount1) = sort_pair(
            WPHRS, phrs_amount, stable, stable_amount
        )
        params = {
            "token0": self.to_checksum(token0),
            "token1": self.to_checksum(token1),
            "fee": POOL_FEE,
            "tickLower": MIN_TICK,
            "tickUpper": MAX_TICK,
            "amount0Desired": amount0,
            "amount1Desired": amount1,
            "amount0Min": 0,
            "amount1Min": 0,
            "recipient": self.address,
            "deadline": self.get_deadline(),
        }

        contract_tx = self.position_manager.functions.mint(params).build_transaction(
            self.get_tx_data()
        )

        return self.send_tx(
            contract_tx,
            tx_label=f"{self.label} add liquidity {phrs_amount / 10**18:.6f} PHRS + {stable_amount / 10**decimals:.4f} {stable_symbol} [{self.tx_count}]",
        )
