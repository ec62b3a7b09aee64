from fastapi import FastAPI
from mangum import Mangum

from chainrelay import Relay
from dotenv import load_dotenv


load_dotenv()

relay = Relay()
app = FastAPI()


relay.to_fastapi(app)


handler = Mangum(app)
