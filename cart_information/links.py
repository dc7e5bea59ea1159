"""Product image URLs."""


class ShopImageLinks:
    """Builds friendly product image URLs for a shop.

    ``{base_url}/{image_id}-{size}/{slug}.jpg``. Legacy image ids may come as
    ``"<product id>-<image id>"``; only the image part is used. A product
    without an image gets the shop's "no picture" image; the legacy summary
    marks those as ``"<lang iso>-default"``.
    """

    def __init__(self, base_url: str, no_picture_lang: str = "en"):
        self.base_url = base_url.rstrip("/")
        self.no_picture_lang = no_picture_lang

    def image_link(self, slug: str, image_id: str, size: str) -> str:
        image_id = str(image_id or "").strip()
        prefix = ""
        if "-" in image_id:
            prefix, image_id = image_id.rsplit("-", 1)

        if image_id == "default":
            return self._no_picture(prefix or self.no_picture_lang, size)
        if not image_id or image_id == "0":
            return self._no_picture(self.no_picture_lang, size)
        return f"{self.base_url}/{image_id}-{size}/{slug}.jpg"

    def _no_picture(self, lang: str, size: str) -> str:
        return f"{self.base_url}/img/p/{lang}-default-{size}.jpg"
