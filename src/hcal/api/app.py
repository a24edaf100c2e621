from fastapi import FastAPI
from hcal.api.public import router as public_router

app = FastAPI(title="hcal public api")
app.include_router(public_router)
