import json
import os
from datetime import datetime
from sys import stderr

from loguru import logger

logger.remove()
logger.add(stderr, format="<white>{time:HH:mm:ss}</white> | <level>{message}</level>")
logger.add(
    f"reports/debug-{datetime.today().strftime('%Y-%m-%d')}.log",
    format="<white>{time:HH:mm:ss}</white> | <level>{message}</level>",
)

# Network data
CHAIN_DATA = {
    "pharos": {
        "rpc": "https://testnet.dplabs-internal.com",
        "explorer": "https://testnet.pharosscan.xyz",
        "token": "PHRS",
        "chain_id": 688688,
    },
}

# APIs
PHAROS_API = "https://api.pharosnetwork.xyz"
PHAROS_SITE = "https://testnet.pharosnetwork.xyz"
ZENITH_FAUCET_API = "https://testnet-router.zenithswap.xyz/api/v1/faucet"

# ERC-20 tokens on Pharos Testnet
WPHRS = "0x76aaaDA469D23216bE5f7C596fA25F282Ff9b364"
USDC = "0x72df0bcd7276f2dFbAc900D1CE63c272C4BCcCED"
USDT = "0xD4071393f8716661958F766DF660033b3d35fD29"
USDC_OLD = "0xAD902CF99C2dE2f1Ba5ec4D642Fd7E49cae9EE37"  # dispensed by Zenith faucet

TOKENS = {
    "WPHRS": WPHRS,
    "USDC": USDC,
    "USDT": USDT,
}

# Zenith DEX
ZENITH_ROUTER = "0x1A4DE519154Ae51200b0Ad7c90F7faC75547888a"
ZENITH_POSITION_MANAGER = "0xF8a1D4FF0f9b9Af7CE58E1fc1833688F3BFd6115"

POOL_FEE = 500  # 0.05%
MIN_TICK = -887220
MAX_TICK = 887220

# Plain value transfer
TRANSFER_GAS = 21000

# Task id of the "send tokens" social task
TRANSFER_TASK_ID = 103

# Infinite amount for max approve
INFINITE_AMOUNT = (
    115792089237316195423570985008687907853269984665640564039457584007913129639935
)

# ABI
ABI_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "abi")

with open(os.path.join(ABI_DIR, "ERC20.json")) as f:
    ERC20_ABI = json.load(f)

with open(os.path.join(ABI_DIR, "SwapRouter.json")) as f:
    SWAP_ROUTER_ABI = json.load(f)

with open(os.path.join(ABI_DIR, "PositionManager.json")) as f:
    POSITION_MANAGER_ABI = json.load(f)
