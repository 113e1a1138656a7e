"""
Geolocalização aproximada do visitante.
- IP do cliente: primeiro item do X-Forwarded-For (proxy confiável) ou o endereço da conexão.
- IPs locais/privados não consultam a API externa.
"""

import ipaddress
import logging

import requests

import settings
from errors import UpstreamError

logger = logging.getLogger(__name__)

LOCAL_LOCATION = {"city": "Development Environment", "country": "Local Network"}
UNKNOWN_LOCATION = {"city": "Unknown", "country": "Location"}

LOCAL_NETWORKS = [
    ipaddress.ip_network("127.0.0.1/32"),
    ipaddress.ip_network("::1/128"),
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
]


def resolve_client_ip(forwarded_for: str | None, remote_addr: str | None, trusted_hops: int = 1) -> str | None:
    """Retorna o IP de origem da requisição.

    X-Forwarded-For tem o formato "client, proxy1, proxy2"; o primeiro item é o
    cliente. Aqui trusted_hops só liga/desliga o header: qualquer valor > 0 usa
    o primeiro item (o número de saltos só afeta o ProxyFix/remote_addr), e com
    trusted_hops=0 o header é ignorado.
    """
    if trusted_hops > 0 and forwarded_for and forwarded_for.strip():
        candidate = forwarded_for.split(",")[0].strip()
        if candidate:
            return candidate
    return remote_addr


def is_local_address(ip: str | None) -> bool:
    """Loopback ou faixas privadas (10/8, 172.16/12, 192.168/16). Vazio conta como local."""
    if not ip:
        return True
    try:
        address = ipaddress.ip_address(ip)
    except ValueError:
        return False

    if address.version == 6 and address.ipv4_mapped is not None:
        address = address.ipv4_mapped

    return any(address in network for network in LOCAL_NETWORKS if network.version == address.version)


def lookup_location(ip: str) -> dict:
    """Consulta o ip-api.com e devolve {city, country}."""

    # IP vem do cliente: escapado para não alterar o caminho/query da URL
    url = f"{settings.IP_API_URL}{requests.utils.quote(ip, safe=':')}"
    try:
        response = requests.get(url, timeout=settings.GEO_TIMEOUT_SECONDS)
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        raise UpstreamError(f"IP lookup failed for {ip}: {e}") from e

    logger.info("ip-api.com response: %s", data)

    if data.get("status") == "success":
        return {
            "city": data.get("city") or "Unknown City",
            "country": data.get("country") or "Unknown Country",
        }

    logger.info("IP lookup failed: %s", data.get("message", "Unknown error"))
    return dict(UNKNOWN_LOCATION)


def locate(ip: str | None) -> dict:
    """Localização do IP; locais/privados não fazem chamada externa."""
    if is_local_address(ip):
        logger.info("Local/private IP %r, skipping lookup", ip)
        return dict(LOCAL_LOCATION)

    logger.info("Looking up IP: %s", ip)
    return lookup_location(ip)
