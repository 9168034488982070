import httpx
import logging
from songlicense.configs import API_URL, SONGLICENSE_HTTP_HEADERS
from songlicense.core.exceptions import ERRORS_BY_KIND

logger = logging.getLogger(__name__)

class SongLicenseClient:
    """HTTP client for a running Songlicense service. Tagged error bodies
    are raised again as the matching LicensingAPIError subclass.
    """

    HTTP_HEADERS = SONGLICENSE_HTTP_HEADERS

    def __init__(self, base_url: str = API_URL, timeout: int = 30, transport=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport

    def _request(self, method: str, path: str, **kwargs):
        headers = {**self.HTTP_HEADERS, **kwargs.pop('headers', {})}
        with httpx.Client(base_url=self.base_url, transport=self.transport,
                          timeout=self.timeout) as client:
            response = client.request(method, path, headers=headers, **kwargs)
        logger.debug(f"{method} {path} -> {response.status_code}")
        if response.is_error:
            body = response.json() if response.headers.get('content-type', '').startswith('application/json') else {}
            if (error := ERRORS_BY_KIND.get(body.get('error'))):
                raise error(body.get('message', ''))
            response.raise_for_status()
        return response.json()

    def get_all_songs(self):
        return self._request('GET', '/songs')

    def get_song(self, song_id: int):
        return self._request('GET', f'/songs/{song_id}')

    def create_song(self, title, artist, owner_id, year, genre, price):
        return self._request('POST', '/songs', json={
            'title': title, 'artist': artist, 'owner_id': owner_id,
            'year': year, 'genre': genre, 'price': price,
        })

    def get_song_owner(self, song_id: int):
        return self._request('GET', f'/songs/{song_id}/owner')

    def search_song_title_genre_year(self, query: str):
        return self._request('GET', '/songs/search', params={'query': query})

    def update_song(self, auth_key, song_id, title, artist, year, genre, price):
        return self._request('PUT', f'/songs/{song_id}', json={
            'auth_key': auth_key, 'title': title, 'artist': artist,
            'year': year, 'genre': genre, 'price': price,
        })

    def delete_song(self, auth_key: str, song_id: int):
        return self._request('DELETE', f'/songs/{song_id}', headers={'X-Auth-Key': auth_key})

    def create_owner(self, name, email, auth_key):
        return self._request('POST', '/owners', json={
            'name': name, 'email': email, 'auth_key': auth_key})

    def get_owner_license_requests(self, owner_id: int):
        return self._request('GET', f'/owners/{owner_id}/licenses')

    def get_license(self, license_id: int):
        return self._request('GET', f'/licenses/{license_id}')

    def create_license_request(self, song_id, licensee_id, start_date, end_date):
        return self._request('POST', '/licenses', json={
            'song_id': song_id, 'licensee_id': licensee_id,
            'start_date': start_date, 'end_date': end_date,
        })

    def approve_license(self, auth_key: str, license_id: int, cost: int):
        return self._request('POST', f'/licenses/{license_id}/approve', json={
            'auth_key': auth_key, 'cost': cost})

    def revoke_license(self, auth_key: str, license_id: int):
        return self._request('POST', f'/licenses/{license_id}/revoke', json={
            'auth_key': auth_key})

    def get_licensee(self, licensee_id: int):
        return self._request('GET', f'/licensees/{licensee_id}')

    def create_licensee(self, name, email):
        return self._request('POST', '/licensees', json={'name': name, 'email': email})

    def get_licensee_licenses(self, licensee_id: int):
        return self._request('GET', f'/licensees/{licensee_id}/licenses')

    def health(self):
        return self._request('GET', '/health')

