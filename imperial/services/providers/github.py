from imperial.services.types import ServiceConfig

GITHUB_USER_URL = "https://api.github.com/user"
GITHUB_EMAILS_URL = "https://api.github.com/user/emails"


def github_service() -> ServiceConfig:
    return ServiceConfig(
        name="github",
        endpoints={
            "user": GITHUB_USER_URL,
            "emails": GITHUB_EMAILS_URL,
        },
    )
