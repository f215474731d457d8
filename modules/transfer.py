from eth_account import Account

from modules.config import TRANSFER_GAS, logger
from modules.utils import check_min_balance, mask_address
from modules.wallet import Wallet


class Transfer(Wallet):
    def __init__(self, private_key, counter=None):
        super().__init__(private_key, counter)
        self.label += "Transfer |"

    @check_min_balance
    def send_random(self, amount):
        """Send PHRS to a freshly generated address. Returns (status, tx_hash)."""
        receiver = Account.create().address

        status = self.transfer(
            receiver,
            amount,
            tx_label=f"{self.label} send {amount / 10**18:.6f} PHRS to {mask_address(receiver)} [{self.tx_count}]",
        )
        return status, self.last_tx_hash

    def sweep(self, to):
        """Send the whole balance minus gas to `to`."""
        balance = self.get_balance()

        if balance == 0:
            logger.warning(f"{self.label} Balance is zero, skipping transfer")
            return

        gas_price = self.web3.eth.gas_price
        gas_cost = gas_price * TRANSFER_GAS

        if balance <= gas_cost:
            logger.warning(f"{self.label} Balance too low to cover gas fees, skipping")
            return

        value = balance - gas_cost
        return self.transfer(
            to,
            value,
            tx_label=f"{self.label} transfer {value / 10**18:.6f} PHRS to {mask_address(to)}",
            gas_price=gas_price,
        )
