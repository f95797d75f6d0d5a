"""
Image transformation utilities for Folio.

Thumbnail rendering for the maintenance pass.
"""

import os

# Lazy import for Pillow so manifest generation never loads it
_Image = None
_ImageOps = None

# Output format by extension; keeps the thumbnail's name identical to the full image
_FORMATS = {
    '.jpg': 'JPEG',
    '.jpeg': 'JPEG',
    '.png': 'PNG',
    '.webp': 'WEBP',
    '.avif': 'AVIF',
}


def _ensure_pil():
    """Lazy load PIL."""
    global _Image, _ImageOps
    if _Image is None:
        from PIL import Image, ImageOps
        _Image = Image
        _ImageOps = ImageOps
    return _Image, _ImageOps


def fit_inside(size, target_edge):
    """Scale (w, h) to fit in a target_edge square, never enlarging."""
    w, h = size
    longest = max(w, h)
    if longest <= target_edge:
        return w, h
    scale = target_edge / float(longest)
    return max(1, int(round(w * scale))), max(1, int(round(h * scale)))


def generate_thumbnail_file(src_path, dst_path, target_edge=1100, jpeg_quality=82, webp_quality=82):
    """
    Render a thumbnail of src_path to dst_path.

    EXIF orientation is applied first, then the image is scaled to fit inside
    a target_edge square without enlargement. The format follows dst_path's
    extension.

    Args:
        src_path: Full-size image path
        dst_path: Thumbnail path to write
        target_edge: Maximum width/height in pixels (default: 1100)
        jpeg_quality: JPEG quality 1-100 (default: 82)
        webp_quality: WebP/AVIF quality 1-100 (default: 82)

    Returns:
        tuple: (width, height) of the written thumbnail

    Raises:
        OSError: If the image can't be decoded or written
    """
    Image, ImageOps = _ensure_pil()

    fmt = _FORMATS.get(os.path.splitext(dst_path)[1].lower(), 'JPEG')

    with Image.open(src_path) as img:
        img = ImageOps.exif_transpose(img)
        new_size = fit_inside(img.size, target_edge)
        if new_size != img.size:
            img = img.resize(new_size, Image.Resampling.LANCZOS)

        if fmt == 'JPEG':
            if img.mode not in ('RGB', 'L'):
                img = img.convert('RGB')
            img.save(dst_path, fmt, quality=jpeg_quality, optimize=True, progressive=True)
        elif fmt in ('WEBP', 'AVIF'):
            img.save(dst_path, fmt, quality=webp_quality)
        else:
            img.save(dst_path, fmt)
        return img.size
