import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..base_module import require_text
from ..config import Settings
from ..errors import GrammarServiceUnavailableError

logger = logging.getLogger(__name__)


class GrammarChecker:
    """
    Forwards text to a LanguageTool-compatible HTTP API and relays its matches.
    """

    def __init__(self, settings=None, session: requests.Session = None):
        self.settings = settings if settings else Settings()
        self.grammar_settings = self.settings.grammar
        self.session = session if session is not None else self._build_session()

    def _build_session(self) -> requests.Session:
        cfg = self.grammar_settings
        session = requests.Session()
        # Configure retries if requested
        retries_total = int(cfg.http_retries_total)
        if retries_total > 0:
            retry_cfg = Retry(
                total=retries_total,
                connect=retries_total,
                read=retries_total,
                backoff_factor=float(cfg.http_backoff_factor),
                status_forcelist=list(cfg.http_status_forcelist),
                allowed_methods=set(m.upper() for m in cfg.http_allowed_retry_methods),
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_cfg)
            session.mount('http://', adapter)
            session.mount('https://', adapter)
        session.headers.update({
            'User-Agent': cfg.user_agent,
            'Accept': 'application/json',
        })
        return session

    def check(self, text: str, language: str = None) -> dict:
        """
        Checks the given text for grammar and style issues.

        Args:
            text (str): The text to check. Blank text raises EmptyInputError.
            language (str): Language code; defaults to the configured language.

        Returns:
            dict: {"matches": [...]} exactly as returned by the upstream service.
        """
        require_text(text)
        cfg = self.grammar_settings
        payload = {"text": text, "language": language or cfg.language}
        try:
            resp = self.session.post(cfg.api_url, data=payload, timeout=cfg.request_timeout)
        except requests.exceptions.RequestException as e:
            logger.error("Grammar service request to %s failed: %s", cfg.api_url, e)
            raise GrammarServiceUnavailableError("Grammar check failed") from e

        if not 200 <= resp.status_code < 300:
            logger.error("Grammar service returned HTTP %s", resp.status_code)
            raise GrammarServiceUnavailableError("Grammar check failed")
        try:
            body = resp.json()
        except ValueError as e:
            logger.error("Grammar service returned a non-JSON body")
            raise GrammarServiceUnavailableError("Grammar check failed") from e

        matches = body.get("matches") if isinstance(body, dict) else None
        if not isinstance(matches, list):
            logger.error("Grammar service response has no 'matches' list")
            raise GrammarServiceUnavailableError("Grammar check failed")
        return {"matches": matches}
