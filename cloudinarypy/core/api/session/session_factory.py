"""Session factory using Factory Pattern."""
import requests
from requests.adapters import HTTPAdapter


class SessionFactory:
    """Factory for creating HTTP sessions."""
    
    @staticmethod
    def create_sync_session(user_agent: str) -> requests.Session:
        """Creates a synchronous HTTP session. Failed requests are not retried."""
        session = requests.Session()
        session.headers['User-Agent'] = user_agent
        session.mount('http://', HTTPAdapter(max_retries=0))
        session.mount('https://', HTTPAdapter(max_retries=0))
        return session
