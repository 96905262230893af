from flask import Blueprint

main = Blueprint('main', __name__)


@main.route('/')
def index():
    # Liveness check
    return 'Quiz backend is running successfully'
