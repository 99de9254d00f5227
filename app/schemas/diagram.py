from pydantic import BaseModel


class DiagramInputs(BaseModel):
    network: str
    router: str
    host0: str
    host1: str
    broadcast: str
