from imperial.services.types import ServiceConfig

GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v1/userinfo?alt=json"


def google_service() -> ServiceConfig:
    return ServiceConfig(
        name="google",
        endpoints={"user": GOOGLE_USERINFO_URL},
    )
