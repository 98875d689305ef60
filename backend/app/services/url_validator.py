"""
URL Validation - Reject malformed or unreachable targets before any provider call.
"""
import ipaddress
from urllib.parse import urlparse

from pydantic import HttpUrl, TypeAdapter, ValidationError as PydanticValidationError

from app.logger import logger

_HTTP_URL = TypeAdapter(HttpUrl)


class UrlValidator:
    """Syntactic URL checks. Performs no DNS lookups or other network I/O."""
    
    ALLOWED_SCHEMES = ("http", "https")
    
    # Private/internal IP ranges the audit provider can never reach
    BLOCKED_RANGES = [
        ipaddress.ip_network("10.0.0.0/8"),
        ipaddress.ip_network("172.16.0.0/12"),
        ipaddress.ip_network("192.168.0.0/16"),
        ipaddress.ip_network("127.0.0.0/8"),
        ipaddress.ip_network("169.254.0.0/16"),
        ipaddress.ip_network("0.0.0.0/8"),
        ipaddress.ip_network("::1/128"),
        ipaddress.ip_network("fc00::/7"),
        ipaddress.ip_network("fe80::/10"),
    ]
    
    # Blocked hostnames
    BLOCKED_HOSTS = {
        "localhost",
        "metadata.google.internal",
    }
    
    @classmethod
    def validate_url(cls, url: str) -> tuple[bool, str]:
        """
        Validate that ``url`` is an absolute http(s) URL with a public host.
        
        Returns:
            tuple: (is_valid, error_message)
        """
        if not url or not url.strip():
            return False, "Empty URL"
        
        target = url.strip()
        
        # The URL parser silently drops tabs and newlines; reject them outright
        if any(ch.isspace() or not ch.isprintable() for ch in target):
            return False, "URL contains whitespace or control characters"
        
        try:
            _HTTP_URL.validate_python(target)
        except PydanticValidationError as e:
            return False, e.errors()[0]["msg"]
        
        try:
            parsed = urlparse(target)
            
            # Check scheme
            if parsed.scheme.lower() not in cls.ALLOWED_SCHEMES:
                return False, f"Invalid scheme: {parsed.scheme or '(none)'}"
            
            # Check for empty host
            if not parsed.netloc:
                return False, "Empty hostname"
            
            hostname = parsed.hostname
            if not hostname:
                return False, "Could not parse hostname"
            
            # Raises ValueError on a malformed port
            parsed.port
            
            # Check blocked hostnames
            if hostname.lower() in cls.BLOCKED_HOSTS:
                return False, f"Blocked hostname: {hostname}"
            
            # Literal IPs only; hostnames are not resolved
            try:
                ip = ipaddress.ip_address(hostname)
            except ValueError:
                return True, ""
            
            for blocked_range in cls.BLOCKED_RANGES:
                if ip in blocked_range:
                    return False, f"IP {ip} is in blocked range {blocked_range}"
            
            return True, ""
            
        except ValueError as e:
            logger.debug(f"URL validation error for {url!r}: {e}")
            return False, str(e)
