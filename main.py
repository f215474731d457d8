from itertools import cycle
from random import shuffle

import questionary
from questionary import Style

import settings
from models.account import load_proxies, load_wallets
from modules.actions import ActionHandler, parse_tx_count
from modules.config import logger
from modules.utils import sleep

EXIT = "Exit"


def process_wallets(accounts, action_callback, *args, **kwargs):
    for index, account in enumerate(accounts, start=1):
        try:
            tx_status = action_callback(account, index, len(accounts), *args, **kwargs)

            # Sleep between wallets
            if tx_status and index < len(accounts):
                sleep(*settings.SLEEP_BETWEEN_WALLETS)

        except Exception as error:
            logger.error(
                f"[{index}/{len(accounts)}] {account.name} | Error processing wallet: {error} \n"
            )


def main():
    accounts = load_wallets(settings.WALLETS_FILE)
    proxies = load_proxies(settings.PROXIES_FILE) if settings.USE_PROXY else []

    if not accounts:
        logger.warning(f"No wallets loaded, check {settings.WALLETS_FILE}")
        return

    if settings.USE_PROXY and not proxies:
        logger.warning(f"Proxies are enabled but {settings.PROXIES_FILE} is empty")
        return

    # Cycle proxies if there are fewer proxies than wallets
    if settings.USE_PROXY and len(accounts) > len(proxies):
        proxies = [proxy for proxy, _ in zip(cycle(proxies), range(len(accounts)))]

    # Shuffle together if needed
    if settings.SHUFFLE_WALLETS and settings.USE_PROXY:
        combined = list(zip(accounts, proxies))
        shuffle(combined)
        accounts, proxies = zip(*combined)
        accounts, proxies = list(accounts), list(proxies)

    elif settings.SHUFFLE_WALLETS:
        shuffle(accounts)

    logger.info(f"Wallets loaded: {len(accounts)}")

    tx_count = questionary.text(
        "Max transactions per wallet", default=str(settings.TX_COUNT)
    ).ask()

    action_handler = ActionHandler(
        accounts, proxies, parse_tx_count(tx_count, settings.TX_COUNT)
    )

    action_map = action_handler.get_action_map()
    action_choices = list(action_map.keys()) + [EXIT]

    custom_style = Style(
        [
            ("pointer", "fg:#7B61FF"),
            ("highlighted", "fg:#7B61FF"),
        ]
    )

    while True:
        action = questionary.select(
            "Select an action to perform:",
            choices=action_choices,
            style=custom_style,
        ).ask()

        # None when the prompt is aborted with Ctrl-C
        if action in (None, EXIT):
            break

        try:
            if action in ActionHandler.STANDALONE:
                action_map[action]()
            else:
                process_wallets(accounts, action_map[action])

            logger.success(f"{action} completed\n")

        except Exception as error:
            logger.error(f"{action} failed: {error}\n")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.warning("Cancelled by the user")
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}")
