from mangum import Mangum

from todo_api.main import app

# One handler for every route: users and todos share the in-memory registry,
# so they must be served by the same process.
handler = Mangum(app)
