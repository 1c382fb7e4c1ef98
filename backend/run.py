from scorekeeper import create_app
from scorekeeper.store import get_store

app = create_app()

if __name__ == '__main__':
    try:
        app.run(host='0.0.0.0', port=app.config['PORT'], debug=True)
    finally:
        with app.app_context():
            get_store(app).shutdown()
