import json

from modules.config import logger


class Account:
    """A wallet entry from wallet.json: name, private key and optional JWT."""

    def __init__(self, name, private_key, token=None):
        self.name = name
        self.private_key = private_key
        self.token = token or None

    def __repr__(self):
        return f"Account(name={self.name!r})"

    def is_ready(self, need_token=False):
        """Check required fields, logging why the wallet is skipped."""
        if not self.private_key:
            logger.warning(f"Skipping {self.name} due to missing private key")
            return False

        if need_token and not self.token:
            logger.warning(f"Skipping {self.name} due to missing token, run Login first")
            return False

        return True

    def to_dict(self):
        return {"name": self.name, "privatekey": self.private_key, "token": self.token}


def load_wallets(file_path):
    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"{file_path} not found")
        return []
    except OSError as error:
        logger.error(f"Failed to read {file_path}: {error}")
        return []
    except ValueError as error:
        logger.error(f"{file_path} is not valid JSON: {error}")
        return []

    if not isinstance(data, dict):
        logger.error(f'{file_path} must be an object like {{"wallets": [...]}}')
        return []

    accounts = []
    for index, row in enumerate(data.get("wallets") or [], start=1):
        if not isinstance(row, dict):
            logger.warning(f"Skipping wallet #{index} in {file_path}: not an object")
            continue

        accounts.append(
            Account(
                name=row.get("name") or f"Wallet{index}",
                private_key=(row.get("privatekey") or "").strip(),
                token=row.get("token"),
            )
        )
    return accounts


def save_wallets(file_path, accounts):
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump({"wallets": [account.to_dict() for account in accounts]}, f, indent=2)


def load_proxies(file_path):
    try:
        with open(file_path) as file:
            proxies = [row.strip() for row in file if row.strip()]
    except FileNotFoundError:
        return []

    return [proxy if proxy.startswith("http") else f"http://{proxy}" for proxy in proxies]
