#######################################################################
#                         General Settings                            #
#######################################################################

WALLETS_FILE = "wallet.json"
PROXIES_FILE = "proxies.txt"

SHUFFLE_WALLETS = False
USE_PROXY = False

# Extra attempts for a failed transaction
RETRY_COUNT = 1

# Bounded retry loop for API requests
API_RETRY_COUNT = 5
API_RETRY_DELAY = 5

SLEEP_BETWEEN_WALLETS = [10, 20]
SLEEP_BETWEEN_ACTIONS = [10, 20]
SLEEP_BETWEEN_TASKS = 15
SLEEP_AFTER_FAUCET = 5

# Transactions per wallet for swaps, LP and transfers (can be changed from the menu)
TX_COUNT = 5

# If wallet balance falls under this value, the action will be skipped
MIN_PHRS_BALANCE = 0.001

#######################################################################
#                        Modules Settings                             #
#######################################################################

# Pharos Network
REF_CODE = "S6NGMzXSCDBxhnwo"
TIMEZONE = "Asia/Jakarta"  # used to show the next faucet window
SOCIAL_TASK_IDS = [201, 202, 203, 204]

# Zenith swap
SWAP_VALUE = [0.001, 0.003]  # PHRS

# Zenith liquidity
LP_PHRS_VALUE = [0.001, 0.002]  # PHRS
LP_STABLE_VALUE = [0.1, 0.2]  # USDC | USDT

# Random transfer
TRANSFER_VALUE = [0.0001, 0.0005]  # PHRS

# Unlimited faucet
SWEEP_WALLETS_FILE = "address.txt"  # generated private keys
MAIN_WALLET_FILE = "wallet.txt"  # address that receives the claimed PHRS
