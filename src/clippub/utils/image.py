import io
import logging

from PIL import Image, UnidentifiedImageError

from clippub.errors import ImageDecodeError, ImageEncodeError

logger = logging.getLogger(__name__)

JPEG_QUALITY = 90


def _flatten(image: Image.Image) -> Image.Image:
    if image.mode in ("P", "PA", "LA"):
        image = image.convert("RGBA")

    if image.mode == "RGBA":
        background = Image.new("RGB", image.size, (255, 255, 255))
        background.paste(image, mask=image.split()[3])
        return background

    if image.mode != "RGB":
        return image.convert("RGB")
    return image


def to_jpeg(data: bytes) -> bytes:
    """Re-encode image bytes as JPEG. JPEG input is returned untouched."""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ImageDecodeError(f"Could not decode image data: {e}", cause=e)

    if image.format == "JPEG":
        logger.info("Image is already JPEG, skipping re-encode")
        return data

    logger.info(f"Converting {image.format} image ({image.mode}, {image.size[0]}x{image.size[1]}) to JPEG")
    try:
        output = io.BytesIO()
        _flatten(image).save(output, format="JPEG", quality=JPEG_QUALITY)
    except (OSError, ValueError) as e:
        raise ImageEncodeError(f"Could not encode image as JPEG: {e}", cause=e)
    return output.getvalue()
