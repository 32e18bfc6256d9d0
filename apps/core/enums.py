from enum import Enum


class Platform(str, Enum):
    """Platform names offered to respondents. Submissions are not checked against it."""
    LINE = "LINE"
    X = "X (Twitter)"
    INSTAGRAM = "Instagram"
    FACEBOOK = "Facebook"
    TIKTOK = "TikTok"
    YOUTUBE = "YouTube"
    THREADS = "Threads"
    PINTEREST = "Pinterest"
    LINKEDIN = "LinkedIn"
    DISCORD = "Discord"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def names(cls) -> list[str]:
        return [p.value for p in cls]
