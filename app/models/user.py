from pydantic import BaseModel, SecretStr


class PlayerIdentity(BaseModel):
    id: str
    name: str
    password: SecretStr
    wins: int = 0
