import os

from golfteam import create_app

app = create_app(os.getenv("FLASK_CONFIG", "default"))

if __name__ == '__main__':
    app.run(debug=app.config.get("DEBUG", False), port=5000)
