import requests
from eth_account import Account
from eth_account.messages import encode_defunct

import settings
from models.browser import Browser
from modules.config import PHAROS_API, ZENITH_FAUCET_API
from modules.utils import retry


class ApiError(Exception):
    """Request went through but the API reported a failure."""


class PharosApiClient:
    def __init__(self, label, private_key, address, token=None, proxy=None):
        self.label = label
        self.private_key = private_key
        self.address = address
        self.token = token
        self.browser = Browser(label, proxy)
        self.session = self.browser.session
        self.base_url = PHAROS_API

    def sign_message(self, message):
        """Sign a message with the private key."""
        message_encoded = encode_defunct(text=message)
        signed_message = Account.sign_message(
            message_encoded, private_key=self.private_key
        )
        return "0x" + signed_message.signature.hex().removeprefix("0x")

    # Helper methods for GET and POST requests
    def _make_request(self, method, url, **kwargs):
        """Wrapper function for making requests."""
        if not url.startswith("http"):
            url = f"{self.base_url}{url}"

        response = self.session.request(method, url, timeout=120, **kwargs)
        response.raise_for_status()
        return response.json()

    def _auth_headers(self):
        if not self.token:
            raise ApiError(f"{self.label} No auth token, login first")
        return {"Authorization": f"Bearer {self.token}"}

    def get(self, endpoint, **kwargs):
        return self._make_request("GET", endpoint, **kwargs)

    def post(self, endpoint, **kwargs):
        return self._make_request("POST", endpoint, **kwargs)

    # API requests
    @retry(label="Login")
    def login(self):
        """Authenticate with the signed "pharos" message and keep the JWT."""
        self.browser.check_ip()

        params = {
            "address": self.address,
            "signature": self.sign_message("pharos"),
            "invite_code": settings.REF_CODE,
        }
        data = self.post(
            "/user/login",
            params=params,
            headers={"Authorization": "Bearer null", "Content-Length": "0"},
        )

        if not data or data.get("code") != 0:
            raise ApiError(f"Authorization failed: {data}")

        self.token = data["data"]["jwt"]
        return self.token

    @retry(label="Profile")
    def get_profile(self) -> dict:
        data = self.get(
            "/user/profile",
            params={"address": self.address},
            headers=self._auth_headers(),
        )

        if not data or data.get("code") != 0:
            raise ApiError(f"Failed to get profile: {data}")

        return data["data"]["user_info"]

    def sign_in(self) -> str:
        """Daily check-in. Returns 'claimed' or 'already'."""
        data = self.post(
            "/sign/in",
            params={"address": self.address},
            headers=self._auth_headers(),
        )
        msg = (data or {}).get("msg") or ""

        if "already" in msg.lower():
            return "already"

        if not data or data.get("code") != 0:
            raise ApiError(f"Check-in failed: {msg or data}")

        return "claimed"

    @retry(label="Faucet status")
    def get_faucet_status(self) -> dict:
        """
        Returns the faucet window of the wallet. Example:
            {
                "is_able_to_faucet": false,
                "avaliable_timestamp": 1751356800
            }
        """
        data = self.get(
            "/faucet/status",
            params={"address": self.address},
            headers=self._auth_headers(),
        )

        if not data or data.get("code") != 0 or not data.get("data"):
            raise ApiError(f"Faucet status check failed: {(data or {}).get('msg')}")

        return data["data"]

    def claim_faucet(self) -> bool:
        data = self.post(
            "/faucet/daily",
            params={"address": self.address},
            headers=self._auth_headers(),
        )

        if not data or data.get("code") != 0:
            raise ApiError(f"Faucet claim failed: {(data or {}).get('msg')}")

        return True

    def verify_task(self, task_id, tx_hash=None) -> bool:
        form = {"address": self.address, "task_id": task_id}
        if tx_hash:
            form["tx_hash"] = tx_hash

        data = self.post("/task/verify", data=form, headers=self._auth_headers())

        if not data or data.get("code") != 0 or not (data.get("data") or {}).get("verified"):
            raise ApiError(f"Task {task_id} verification failed: {(data or {}).get('msg')}")

        return True

    def claim_zenith_faucet(self, token_address) -> str:
        payload = {"tokenAddress": token_address, "userAddress": self.address}

        try:
            data = self.post(ZENITH_FAUCET_API, json=payload) or {}
        except requests.HTTPError as error:
            # Rejected claims come back as 4xx with a JSON message
            try:
                message = error.response.json().get("message")
            except ValueError:
                message = None
            raise ApiError(f"Faucet claim failed: {message or error}") from error

        tx_hash = (data.get("data") or {}).get("txHash")
        if data.get("status") != 200 or not tx_hash:
            raise ApiError(f"Faucet claim failed: {data.get('message', 'Unknown error')}")

        return tx_hash
