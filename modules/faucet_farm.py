import os

import questionary
from eth_account import Account

import settings
from modules.config import logger
from modules.pharos import Pharos
from modules.transfer import Transfer
from modules.utils import mask_address, sleep


def generate_wallets(count, file_path):
    """Create `count` throwaway keys and append them to `file_path`."""
    keys = []

    for index in range(1, count + 1):
        account = Account.create()
        keys.append("0x" + account.key.hex().removeprefix("0x"))
        logger.info(f"Generated wallet {index}/{count}: {mask_address(account.address)}")

    with open(file_path, "a") as f:
        f.write("\n".join(keys) + "\n")

    logger.success(f"Saved {count} wallets to {file_path}")
    return keys


def load_keys(file_path):
    with open(file_path) as f:
        keys = [row.strip() for row in f if row.strip()]
    return keys


def read_main_wallet(file_path):
    if not os.path.exists(file_path):
        return None

    with open(file_path) as f:
        return f.read().strip() or None


class FaucetFarm:
    """Generate throwaway wallets, claim the faucet on each, sweep PHRS to the main wallet."""

    def __init__(self, proxies=None):
        self.proxies = proxies or []
        self.claimed = 0
        self.failed = 0

    def get_proxy(self, index):
        if settings.USE_PROXY and self.proxies:
            return self.proxies[(index - 1) % len(self.proxies)]
        return None

    def ask_wallet_count(self):
        answer = questionary.text(
            "How many wallets do you want to create? (0 to skip)", default="0"
        ).ask()

        try:
            return max(int(answer or 0), 0)
        except ValueError:
            return 0

    def claim(self, key, index, total):
        try:
            pharos = Pharos(key, f"[{index}/{total}]", proxy=self.get_proxy(index))
        except Exception as error:
            logger.error(f"[{index}/{total}] Invalid private key {mask_address(key)}: {error}")
            self.failed += 1
            return

        try:
            pharos.login()
        except Exception as error:
            logger.error(f"{pharos.label} Login failed, skipping faucet claim: {error}")
            self.failed += 1
            return

        try:
            if pharos.claim_faucet():
                self.claimed += 1
        except Exception as error:
            logger.error(f"{pharos.label} Faucet claim failed: {error}")
            self.failed += 1

    def sweep(self, keys, main_wallet):
        sent, failed = 0, 0

        for index, key in enumerate(keys, start=1):
            try:
                wallet = Transfer(key, f"[{index}/{len(keys)}]")
                if wallet.sweep(main_wallet):
                    sent += 1
            except Exception as error:
                logger.error(f"[{index}/{len(keys)}] Transfer failed: {error}")
                failed += 1

        logger.info(f"Transfer summary: {sent} successful, {failed} failed")

    def run(self):
        count = self.ask_wallet_count()
        if count > 0:
            generate_wallets(count, settings.SWEEP_WALLETS_FILE)

        if not os.path.exists(settings.SWEEP_WALLETS_FILE):
            logger.warning(f"{settings.SWEEP_WALLETS_FILE} not found, generate wallets first")
            return False

        keys = load_keys(settings.SWEEP_WALLETS_FILE)
        logger.info(f"Total wallets to process for faucet claims: {len(keys)}")

        for index, key in enumerate(keys, start=1):
            self.claim(key, index, len(keys))

            if index < len(keys):
                sleep(settings.SLEEP_AFTER_FAUCET, new_line=False)

        logger.info(f"Faucet claim summary: {self.claimed} successful, {self.failed} failed")

        main_wallet = read_main_wallet(settings.MAIN_WALLET_FILE)
        if not main_wallet:
            logger.warning(
                f"Main wallet address missing in {settings.MAIN_WALLET_FILE}, cannot transfer funds"
            )
            return False

        logger.info(f"Transferring funds to main wallet {mask_address(main_wallet)}")
        self.sweep(keys, main_wallet)
        return True
