"""
Print the table cells found on one page of a PDF.

Usage:
    python scripts/extract_cells.py path/to/your.pdf [page] [--all] [--json] [--fine] [--debug]

Options:
    page      1-indexed page number (default 1)
    --all     also print cells without text
    --json    print the cells as a JSON list
    --fine    tolerances for dense grids
    --debug   print stage diagnostics and the debug summary
"""

import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cellgrid import PipelineConfig, PageSourceError, extract_page_cells


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    flags = {a for a in argv if a.startswith('--')}
    positional = [a for a in argv if not a.startswith('--')]

    if not positional:
        print("Usage: python scripts/extract_cells.py path/to/your.pdf [page] [--all] [--json] [--fine] [--debug]")
        return 1

    pdf_path = positional[0]
    try:
        page_number = int(positional[1]) if len(positional) > 1 else 1
    except ValueError:
        print(f"Error: page must be a number: {positional[1]}")
        return 1

    config = PipelineConfig.fine() if '--fine' in flags else PipelineConfig.default()
    config.binder_config.drop_empty = '--all' not in flags
    config.debug = '--debug' in flags

    try:
        text_rects, debug = extract_page_cells(pdf_path, page_number, config)
    except PageSourceError as e:
        print(f"Error: {e}")
        return 1

    if '--json' in flags:
        print(json.dumps([r.as_dict() for r in text_rects], indent=2, ensure_ascii=False))
    else:
        for rect in text_rects:
            print(f"{rect.left:.2f} {rect.bottom:.2f} {rect.right:.2f} {rect.top:.2f}", *rect.strings)

    if config.debug:
        print(debug.summary())
    return 0


if __name__ == "__main__":
    # Fix Unicode encoding for Windows console
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    sys.exit(main())
