from flask import current_app, send_from_directory


def show_draw():
    return send_from_directory(current_app.static_folder, "draw.html")
