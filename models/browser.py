import requests
from fake_useragent import UserAgent
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from modules.config import PHAROS_SITE, logger


class Browser:
    def __init__(self, label, proxy=None):
        self.label = label
        self.ua = UserAgent()
        self.proxy = proxy
        self.session = self.create_session(proxy)

    def create_session(self, proxy):
        session = requests.Session()

        # Configure retries
        retries = Retry(
            total=5,
            backoff_factor=0.5,  # Wait time between retries (exponential backoff)
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=frozenset(["GET", "POST"]),
        )

        adapter = HTTPAdapter(max_retries=retries)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        if proxy:
            session.proxies.update({"http": proxy, "https": proxy})

        session.headers.update(
            {
                "Accept": "application/json, text/plain, */*",
                "Accept-Language": "en-US,en;q=0.9",
                "Origin": PHAROS_SITE,
                "Referer": f"{PHAROS_SITE}/",
                "Sec-Fetch-Dest": "empty",
                "Sec-Fetch-Mode": "cors",
                "Sec-Fetch-Site": "same-site",
                "User-Agent": self.ua.random,
            }
        )
        return session

    def check_ip(self):
        if not self.proxy:
            return

        try:
            resp = self.session.get("https://httpbin.org/ip", timeout=10)
            ip = resp.json()["origin"]
            logger.info(f"{self.label} Current IP: {ip}")

        except Exception as error:
            logger.error(f"{self.label} Failed to get IP: {error}")
