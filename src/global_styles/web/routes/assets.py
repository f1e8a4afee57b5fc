from __future__ import annotations

import hashlib

from flask import Blueprint, Response, current_app, request


def make_assets_bp(url_path: str) -> Blueprint:
    """Blueprint serving the generated stylesheet at *url_path*.

    *url_path* is the path part of ``StylesheetFile.url`` so the address
    reported to the editor is the one served here.
    """
    assets_bp = Blueprint("assets", __name__)

    @assets_bp.route(url_path)
    def stylesheet():
        stylesheet = current_app.extensions["stylesheet"]
        if not stylesheet.info().exists:
            return Response("", status=404, mimetype="text/css")

        css = stylesheet.read()
        # Content hash: two saves within one mtime tick still differ.
        etag = hashlib.sha256(css.encode("utf-8")).hexdigest()[:32]
        if request.if_none_match.contains(etag):
            return Response(status=304)

        response = Response(css, mimetype="text/css")
        response.set_etag(etag)
        return response

    return assets_bp
