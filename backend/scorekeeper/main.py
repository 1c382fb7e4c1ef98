import os

from flask import Blueprint, current_app, send_from_directory

main = Blueprint('main', __name__)


@main.route('/', defaults={'path': ''})
@main.route('/<path:path>')
def index(path):
    """Serve built frontend assets, falling back to the entry page."""
    static_folder = current_app.config['STATIC_FOLDER']
    if path and os.path.isfile(os.path.join(static_folder, path)):
        return send_from_directory(static_folder, path)
    return send_from_directory(static_folder, 'index.html')
