from __future__ import annotations

from typing import Optional

import tldextract


# Bundled public suffix snapshot only; no network fetch at runtime
_extract = tldextract.TLDExtract(suffix_list_urls=())


def extract_apex_domain(url_or_domain: Optional[str]) -> Optional[str]:
    if not url_or_domain:
        return None
    text = str(url_or_domain).strip().lower()
    if not text.startswith('http://') and not text.startswith('https://'):
        text = f"http://{text}"
    ext = _extract(text)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return None


def normalize_website(url: Optional[str]) -> Optional[str]:
    """Canonical https URL for a company website, keeping subdomain and path.

    'neuralflow.ai' -> 'https://neuralflow.ai'; 'http://www.x.com/' -> 'https://www.x.com'.
    Returns None when no registrable domain can be found.
    """
    if not url or not str(url).strip():
        return None
    text = str(url).strip()
    if extract_apex_domain(text) is None:
        return None
    lowered = text.lower()
    if lowered.startswith('http://'):
        text = text[len('http://'):]
    elif lowered.startswith('https://'):
        text = text[len('https://'):]
    return f"https://{text.rstrip('/')}"
