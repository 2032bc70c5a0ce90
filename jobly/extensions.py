from flask_jwt_extended import JWTManager
from flask_bcrypt import Bcrypt
from flask_cors import CORS

cors = CORS()

# login manager for handling JWTs
jwt = JWTManager()

bcrypt = Bcrypt()
