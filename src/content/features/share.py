"""Social share links for a post."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
from urllib.parse import quote


@dataclass
class ShareLinks:
    twitter: str
    facebook: str
    linkedin: str
    reddit: str

    def to_dict(self) -> dict[str, str]:
        return {
            "twitter": self.twitter,
            "facebook": self.facebook,
            "linkedin": self.linkedin,
            "reddit": self.reddit,
        }


def _encode(value: str) -> str:
    # Same character set as encodeURIComponent
    return quote(value, safe="-_.!~*'()")


def build_share_links(title: str, url: str, tags: Sequence[str] = ()) -> ShareLinks:
    """Share URLs for the supported networks.

    Twitter hashtags are the post tags with hyphens removed.
    """
    hashtags = ",".join(tag.replace("-", "") for tag in tags)
    t, u = _encode(title), _encode(url)

    return ShareLinks(
        twitter=f"https://twitter.com/intent/tweet?text={t}&url={u}&hashtags={_encode(hashtags)}",
        facebook=f"https://www.facebook.com/sharer/sharer.php?u={u}",
        linkedin=f"https://www.linkedin.com/sharing/share-offsite/?url={u}",
        reddit=f"https://www.reddit.com/submit?url={u}&title={t}",
    )
