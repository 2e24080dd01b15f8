# src/color_literal_extractor/demo.py
import argparse
import json
import logging
import os
import sys
from pathlib import Path

_SUFFIX_LANGUAGES = {
    ".css": "css", ".scss": "scss", ".sass": "scss", ".less": "less", ".styl": "stylus",
    ".html": "html", ".htm": "html", ".js": "javascript", ".jsx": "javascript",
    ".mjs": "javascript", ".ts": "typescript", ".tsx": "typescript", ".svg": "svg",
}


def _guess_language(path: str) -> str:
    return _SUFFIX_LANGUAGES.get(Path(path).suffix.lower(), "unknown")


def main(argv=None):
    """CLI demo: extract colors from a file, optionally convert, sort and analyze them."""
    from dotenv import load_dotenv

    from .extraction.analysis import (
        analyze_palette,
        calculate_color_statistics,
        cluster_colors,
        detect_color_anomalies,
        detect_color_gaps,
        detect_color_patterns,
    )
    from .extraction.color.conversion import ConversionOptions, convert_colors, get_available_formats
    from .extraction.general.utils import check_content_safety, get_settings, reload_topics
    from .extraction.orchestrator import extract_colors
    from .extraction.postprocess import dedupe_colors, sort_colors
    from .extraction.types import to_dict

    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="color-extract-demo",
        description="Extract color literals from a stylesheet, markup, script or SVG file.",
    )
    parser.add_argument("file", help="File to scan ('-' reads stdin)")
    parser.add_argument("--language", help="Language id (default: guessed from extension)")
    parser.add_argument(
        "--convert", choices=get_available_formats(), help="Also convert every color"
    )
    parser.add_argument("--sort", dest="sort_mode", help="Sort the unique values (e.g. hue-asc)")
    parser.add_argument("--analyze", action="store_true", help="Include palette analysis")
    parser.add_argument("--max-colors", type=int, dest="max_colors", help="Truncate results")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    args = parser.parse_args(argv)

    if args.debug:
        os.environ.setdefault("COLOR_EXTRACTOR_DEBUG_TOPICS", "all")
        reload_topics()
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.file == "-":
            content = sys.stdin.read()
            language = args.language or "unknown"
        else:
            content = Path(args.file).read_text(encoding="utf-8")
            language = args.language or _guess_language(args.file)

        settings = get_settings()
        safety = check_content_safety(content, settings)
        if not safety.proceed:
            print(f"❌ {safety.message}", file=sys.stderr)
            return 2

        result = extract_colors(
            content,
            language,
            filepath=None if args.file == "-" else args.file,
            max_colors=args.max_colors if args.max_colors is not None else settings.max_colors,
            timeout_ms=settings.timeout_ms,
            include_metadata=True,
        )
        out = to_dict(result)
        out["warnings"] = list(out["warnings"]) + list(safety.warnings)

        values = [c.value for c in result.colors]
        if settings.dedupe_enabled:
            values = dedupe_colors(values)
        sort_mode = args.sort_mode or (settings.sort_mode if settings.sort_enabled else "off")
        out["values"] = sort_colors(values, sort_mode)

        if args.convert:
            options = ConversionOptions(target_format=args.convert)
            out["converted"] = [to_dict(r) for r in convert_colors(result.colors, options)]

        if args.analyze and settings.analysis_enabled:
            colors = list(result.colors)
            analysis = {"palette": to_dict(analyze_palette(colors))}
            if settings.analysis_include_stats:
                analysis["statistics"] = to_dict(calculate_color_statistics(colors))
            analysis["anomalies"] = [to_dict(a) for a in detect_color_anomalies(colors)]
            analysis["patterns"] = [to_dict(p) for p in detect_color_patterns(colors)]
            analysis["clusters"] = [
                to_dict(c) for c in cluster_colors(colors, settings.max_clusters)
            ]
            analysis["gaps"] = [to_dict(g) for g in detect_color_gaps(colors)]
            out["analysis"] = analysis

        print(json.dumps(out, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
