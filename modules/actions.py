from datetime import datetime

import questionary
from rich.console import Console
from rich.table import Table

import settings
from models.account import save_wallets
from modules.config import TOKENS, TRANSFER_TASK_ID, USDC, USDT, logger
from modules.faucet_farm import FaucetFarm
from modules.pharos import Pharos
from modules.transfer import Transfer
from modules.utils import create_csv, get_rand_amount, random_sleep
from modules.zenith import Zenith


class ActionHandler:
    """
    Centralized handler for mapping user actions to their corresponding functions.

    Per-wallet runners take (account, index, total) and return a truthy value
    when they did some work. Actions listed in STANDALONE run once, not per wallet.
    """

    STANDALONE = ("Check Balance", "Unlimited Faucet", "Set Tx Count")

    def __init__(self, accounts, proxies, tx_count=None):
        self.accounts = accounts
        self.proxies = proxies
        self.tx_count = tx_count or settings.TX_COUNT

    def get_action_map(self):
        return {
            "Login": self.login,
            "Check-in": self.check_in,
            "Check Balance": self.check_balance,
            "Claim PHRS": self.claim_phrs,
            "Claim USDC": self.claim_usdc,
            "Swap PHRS > USDC": lambda account, idx, total: self.swap(
                account, idx, total, USDC
            ),
            "Swap PHRS > USDT": lambda account, idx, total: self.swap(
                account, idx, total, USDT
            ),
            "Add LP PHRS-USDC": lambda account, idx, total: self.add_liquidity(
                account, idx, total, "USDC"
            ),
            "Add LP PHRS-USDT": lambda account, idx, total: self.add_liquidity(
                account, idx, total, "USDT"
            ),
            "Random Transfer": self.random_transfer,
            "Social Task": self.social_task,
            "Unlimited Faucet": self.unlimited_faucet,
            "Set Tx Count": self.set_tx_count,
        }

    def get_proxy(self, index):
        """Assigns a proxy to a wallet based on its index"""
        if settings.USE_PROXY and self.proxies:
            # Zero-based index for proxy list
            proxy_index = (index - 1) % len(self.proxies)
            return self.proxies[proxy_index]
        return None

    def get_pharos(self, account, index, total):
        return Pharos(
            account.private_key,
            f"[{index}/{total}]",
            token=account.token,
            proxy=self.get_proxy(index),
        )

    def login(self, account, index, total):
        if not account.is_ready():
            return False

        account.token = self.get_pharos(account, index, total).login()
        save_wallets(settings.WALLETS_FILE, self.accounts)
        return True

    def check_in(self, account, index, total):
        if not account.is_ready(need_token=True):
            return False

        return self.get_pharos(account, index, total).check_in()

    def claim_phrs(self, account, index, total):
        if not account.is_ready(need_token=True):
            return False

        return self.get_pharos(account, index, total).claim_faucet()

    def claim_usdc(self, account, index, total):
        if not account.is_ready():
            return False

        zenith = Zenith(account.private_key, f"[{index}/{total}]", self.get_proxy(index))
        return zenith.claim_faucet()

    def social_task(self, account, index, total):
        if not account.is_ready(need_token=True):
            return False

        pharos = self.get_pharos(account, index, total)
        return pharos.verify_social_tasks(settings.SOCIAL_TASK_IDS)

    def swap(self, account, index, total, to_token):
        if not account.is_ready():
            return False

        zenith = Zenith(account.private_key, f"[{index}/{total}]", self.get_proxy(index))
        done = 0

        for tx_index in range(1, self.tx_count + 1):
            amount = get_rand_amount(*settings.SWAP_VALUE)
            if zenith.swap(to_token, amount):
                done += 1

            if tx_index < self.tx_count:
                random_sleep(*settings.SLEEP_BETWEEN_ACTIONS)

        return done

    def add_liquidity(self, account, index, total, stable_symbol):
        if not account.is_ready():
            return False

        zenith = Zenith(account.private_key, f"[{index}/{total}]", self.get_proxy(index))
        _, decimals, _ = zenith.get_token(TOKENS[stable_symbol])
        done = 0

        for tx_index in range(1, self.tx_count + 1):
            phrs_amount = get_rand_amount(*settings.LP_PHRS_VALUE)
            stable_amount = get_rand_amount(*settings.LP_STABLE_VALUE, decimals=decimals)

            if zenith.add_liquidity(stable_symbol, phrs_amount, stable_amount):
                done += 1

            if tx_index < self.tx_count:
                random_sleep(*settings.SLEEP_BETWEEN_ACTIONS)

        return done

    def random_transfer(self, account, index, total):
        if not account.is_ready():
            return False

        transfer = Transfer(account.private_key, f"[{index}/{total}]")
        pharos = self.get_pharos(account, index, total) if account.token else None
        done = 0

        for tx_index in range(1, self.tx_count + 1):
            amount = get_rand_amount(*settings.TRANSFER_VALUE)
            result = transfer.send_random(amount)

            if result and result[0]:
                done += 1
                if pharos:
                    self.verify_transfer(pharos, result[1])

            if tx_index < self.tx_count:
                random_sleep(*settings.SLEEP_BETWEEN_ACTIONS)

        return done

    def verify_transfer(self, pharos, tx_hash):
        try:
            pharos.client.verify_task(TRANSFER_TASK_ID, tx_hash=tx_hash)
            logger.success(f"{pharos.label} Transfer verified")
        except Exception as error:
            logger.warning(f"{pharos.label} {error}")

    def check_balance(self):
        logger.info(f"Checking balances of {len(self.accounts)} accounts...\n")

        table = Table(title="Pharos Testnet")
        columns = ["№", "Name", "Wallet", "Points", "PHRS", "WPHRS", "USDC", "USDT"]
        for column in columns:
            table.add_column(column)

        rows = []
        for index, account in enumerate(self.accounts, start=1):
            if not account.is_ready():
                continue

            pharos = self.get_pharos(account, index, len(self.accounts))
            try:
                stats = pharos.get_stats()
            except Exception as error:
                logger.error(f"{pharos.label} Failed to get balances: {error}")
                continue

            row = [
                index,
                account.name,
                pharos.address,
                stats["points"],
                f"{stats['PHRS']:.4f}",
                f"{stats['WPHRS']:.4f}",
                f"{stats['USDC']:.4f}",
                f"{stats['USDT']:.4f}",
            ]
            table.add_row(*[str(value) for value in row])
            rows.append(row)

        Console().print(table)

        date = datetime.today().strftime("%Y-%m-%d")
        create_csv(f"reports/balances-{date}.csv", "w", columns, rows)
        return True

    def unlimited_faucet(self):
        return FaucetFarm(self.proxies).run()

    def set_tx_count(self):
        answer = questionary.text(
            "New transaction count", default=str(self.tx_count)
        ).ask()
        self.tx_count = parse_tx_count(answer, self.tx_count)

        logger.info(f"Transaction count updated: {self.tx_count}")
        return True


def parse_tx_count(value, default):
    """Positive int from user input, `default` for anything else."""
    try:
        count = int(value)
    except (TypeError, ValueError):
        return default

    return count if count > 0 else default
