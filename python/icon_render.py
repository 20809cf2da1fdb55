#!/usr/bin/env python3
"""
Icon renderer - decodes a source image and produces PNG renditions.

Usage:
    python icon_render.py --input-file <file> --width <px> --output-file <file>
"""

import argparse
import sys
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from constants import ICON_NAME_FORMAT
from errors import AppIconizerError, SourceNotFoundError, DecodeError, EncodeError


def load_source_image(source_file):
    """
    Decode the source image into memory.

    The image is fully loaded and converted to RGBA so later resizes do
    not touch the file again and behave the same for every input mode.

    Args:
        source_file: Path to the source image

    Returns:
        PIL.Image.Image in RGBA mode
    """
    source_path = Path(source_file)
    if not source_path.is_file():
        raise SourceNotFoundError("Source image does not exist", source=source_path)

    try:
        with Image.open(source_path) as image:
            image.load()
            return image.convert("RGBA")
    except UnidentifiedImageError as e:
        raise DecodeError("Unsupported image format", source=source_path) from e
    except PermissionError as e:
        raise DecodeError("Cannot read source image", source=source_path) from e
    except Image.DecompressionBombError as e:
        raise DecodeError("Image too large to decode", source=source_path) from e
    except (OSError, SyntaxError, ValueError) as e:
        raise DecodeError("Corrupt or truncated image", source=source_path) from e


def target_height(source_width, source_height, width):
    """Height that keeps the source aspect ratio at the given width."""
    return max(1, round(width * source_height / source_width))


def resample(image, width):
    """Resize image to exactly `width` pixels wide, preserving aspect ratio."""
    if width <= 0:
        raise ValueError(f"Target width must be positive, got {width}")

    height = target_height(image.width, image.height, width)
    return image.resize((width, height), Image.Resampling.LANCZOS)


def icon_filename(width):
    return ICON_NAME_FORMAT.format(width=width)


def encode_png(image, width=None):
    """Encode an image as PNG bytes."""
    buffer = BytesIO()
    try:
        image.save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError("PNG encoding failed", width=width) from e
    return buffer.getvalue()


def render(image, width):
    """
    Produce one rendition in memory.

    Args:
        image: Decoded source image
        width: Target width in pixels

    Returns:
        Tuple of (filename, png_bytes)
    """
    resized = resample(image, width)
    return icon_filename(width), encode_png(resized, width=width)


def render_to_file(input_file, width, output_file):
    """Render a single width of input_file into output_file."""
    image = load_source_image(input_file)
    _, data = render(image, width)

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return output_path


def main():
    parser = argparse.ArgumentParser(description="Render a single icon width from a source image")
    parser.add_argument("--input-file", required=True, metavar="<file>", help="Source image path")
    parser.add_argument("--width", required=True, type=int, metavar="<px>", help="Target width in pixels")
    parser.add_argument("--output-file", metavar="<file>", help="Output PNG path (default: icon_<width>.png)")
    args = parser.parse_args()

    if args.width <= 0:
        parser.error("--width must be a positive integer")

    output_file = args.output_file or icon_filename(args.width)

    try:
        output_path = render_to_file(args.input_file, args.width, output_file)
        print(f"Created icon: {output_path}")
    except AppIconizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
