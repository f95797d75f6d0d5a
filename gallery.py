#!/usr/bin/env python3
"""
Folio - portfolio gallery manifest generator.

CLI entry point. Manifest building is in manifests/, the featured-set
maintenance pass in maintenance/.
"""
import os
import sys

# Ensure the script's directory is in Python path for local imports
# This allows running the script from any directory
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

import argparse
import logging

from config import load_gallery_config, resolve_config_path
from manifests import ImagesDirNotFound, generate_all
from titles import TitleInferencer


def build_parser():
    parser = argparse.ArgumentParser(
        description='Folio: generate gallery manifests from image folders',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python gallery.py                             # Regenerate every manifest
  python gallery.py --category cosplay          # Only images/cosplay
  python gallery.py --process-sets              # Thumbnails + meta.json, then manifests
  python gallery.py --process-sets --skip-thumbnails
  python gallery.py --config my_config.json     # Use custom config
        '''
    )
    parser.add_argument('--config', default=None,
                        help='Path to gallery_config.json (default: project root)')
    parser.add_argument('--images-dir', default=None,
                        help='Root images directory (overrides config images_dir)')
    parser.add_argument('--url-prefix', default=None,
                        help='Root-relative URI prefix for image paths (default: /images)')
    parser.add_argument('--category', action='append', dest='categories', metavar='NAME',
                        help='Only process this category (repeatable)')

    maint_group = parser.add_argument_group('Maintenance')
    maint_group.add_argument('--process-sets', action='store_true',
                             help='Move loose images, render thumbnails and upsert meta.json before generating')
    maint_group.add_argument('--skip-thumbnails', action='store_true',
                             help='With --process-sets, do not render thumbnails')

    parser.add_argument('--quiet', action='store_true', help='Only print errors')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')

    try:
        config = load_gallery_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    images_dir = os.path.abspath(args.images_dir) if args.images_dir else resolve_config_path(config, 'images_dir')
    url_prefix = args.url_prefix or config['url_prefix']
    extensions = frozenset(ext.lower() for ext in config['image_extensions'])
    inferencer = TitleInferencer(extra_patterns=config.get('extra_title_patterns'))
    verbose = not args.quiet

    if not os.path.isdir(images_dir):
        print(f"Images directory not found: {images_dir}", file=sys.stderr)
        return 1

    if args.process_sets:
        from maintenance import ThumbnailSettings, process_all
        settings = ThumbnailSettings(config['thumbnails'], enabled=not args.skip_thumbnails)
        try:
            process_all(images_dir, settings, args.categories, extensions, verbose)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    try:
        report = generate_all(images_dir, url_prefix, args.categories, extensions, inferencer, verbose)
    except ImagesDirNotFound as e:
        print(str(e), file=sys.stderr)
        return 1

    return 1 if report.has_failures else 0


if __name__ == '__main__':
    sys.exit(main())
