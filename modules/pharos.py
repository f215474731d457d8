import settings
from modules.config import TOKENS, logger
from modules.pharos_api_client import ApiError, PharosApiClient
from modules.utils import format_timestamp, sleep
from modules.wallet import Wallet


class Pharos(Wallet):
    def __init__(self, private_key, counter, token=None, proxy=None):
        super().__init__(private_key, counter)
        self.label += "Pharos |"
        self.client = PharosApiClient(
            self.label, private_key, self.address, token=token, proxy=proxy
        )

    @property
    def token(self):
        return self.client.token

    def login(self):
        token = self.client.login()
        logger.success(f"{self.label} Login successful")
        return token

    def check_in(self):
        result = self.client.sign_in()

        if result == "already":
            logger.warning(f"{self.label} Already checked in today")
        else:
            logger.success(f"{self.label} Checked in successfully")

        return True

    def claim_faucet(self):
        logger.info(f"{self.label} Checking faucet status")
        status = self.client.get_faucet_status()

        if not status.get("is_able_to_faucet"):
            next_time = format_timestamp(status["avaliable_timestamp"])
            logger.warning(f"{self.label} Faucet not available. Next available: {next_time}")
            return False

        logger.info(f"{self.label} Claiming faucet")
        self.client.claim_faucet()
        logger.success(f"{self.label} Faucet claimed successfully")
        return True

    def verify_social_tasks(self, task_ids):
        verified = 0

        for index, task_id in enumerate(task_ids, start=1):
            try:
                logger.info(f"{self.label} Verifying task {task_id}")
                self.client.verify_task(task_id)
                logger.success(f"{self.label} Task {task_id} verified successfully")
                verified += 1

            except ApiError as error:
                logger.warning(f"{self.label} {error}")

            except Exception as error:
                logger.error(f"{self.label} Task {task_id} HTTP error: {error}")

            if index < len(task_ids):
                sleep(
                    settings.SLEEP_BETWEEN_TASKS,
                    label=f"{self.label} Next task in",
                    new_line=False,
                )

        return verified

    def get_stats(self):
        """Points from the profile plus native and token balances."""
        stats = {
            "points": "N/A",
            "PHRS": self.get_balance() / 10**18,
        }

        for symbol, address in TOKENS.items():
            balance, decimals, _ = self.get_token(address)
            stats[symbol] = balance / 10**decimals

        if self.token:
            profile = self.client.get_profile()
            stats["points"] = profile.get("TotalPoints", "N/A")

        return stats
