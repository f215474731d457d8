import csv
import functools
import os
import random
import time
from datetime import datetime
from zoneinfo import ZoneInfo

from tqdm import tqdm
from web3 import Web3

import settings
from modules.config import logger


def retry(attempts=None, delay=None, label=""):
    """
    Flat bounded retry loop with a fixed delay between attempts.

    The last error is re-raised once all attempts are used up.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            max_attempts = attempts or settings.API_RETRY_COUNT
            wait = settings.API_RETRY_DELAY if delay is None else delay

            for attempt in range(1, max_attempts + 1):
                try:
                    return func(*args, **kwargs)
                except Exception as error:
                    name = label or func.__name__
                    logger.warning(
                        f"{name} failed [{attempt}/{max_attempts}]: {error}"
                    )
                    if attempt == max_attempts:
                        raise
                    time.sleep(wait)

        return wrapper

    return decorator


def check_min_balance(func):
    def wrapper(self, *args, **kwargs):
        balance = self.get_balance()
        min_balance = self.web3.to_wei(settings.MIN_PHRS_BALANCE, "ether")

        if balance < min_balance:
            logger.warning(
                f"{self.label} Current balance is under {settings.MIN_PHRS_BALANCE} PHRS, skipping \n"
            )
            return
        return func(self, *args, **kwargs)

    return wrapper


def create_csv(path, mode, headers, data):
    directory = os.path.dirname(path)
    dir_exists = os.path.exists(directory)

    if not dir_exists:
        os.makedirs(directory, exist_ok=True)

    with open(path, mode, encoding="utf-8", newline="") as file:
        writer = csv.writer(file)

        if file.tell() == 0:
            writer.writerow(headers)
            logger.success(f"{path} created")

        writer.writerows(data)


def get_rand_amount(min, max, decimals=18):
    rand_amount = random.uniform(min, max)
    if decimals == 18:
        return Web3.to_wei(rand_amount, "ether")
    return int(rand_amount * 10**decimals)


def mask_address(address):
    return f"{address[:6]}...{address[-4:]}"


def format_timestamp(timestamp, tz=None):
    """Unix seconds -> '2025-07-01 08:00:00' in the configured timezone."""
    zone = ZoneInfo(tz or settings.TIMEZONE)
    return datetime.fromtimestamp(int(timestamp), zone).strftime("%Y-%m-%d %H:%M:%S")


def random_sleep(min_time, max_time):
    duration = random.randint(min_time, max_time)
    time.sleep(duration)


def sleep(sleep_time, to_sleep=None, label="Sleep until next account", new_line=True):
    if to_sleep is not None:
        x = random.randint(sleep_time, to_sleep)
    else:
        x = sleep_time

    desc = datetime.now().strftime("%H:%M:%S")

    for _ in tqdm(
        range(x), desc=desc, bar_format=f"{{desc}} | {label} {{n_fmt}}/{{total_fmt}}"
    ):
        time.sleep(1)

    if new_line:
        print()  # new line break
