import argparse
import sys
from pathlib import Path
from typing import List, Optional
from content_review.client import (
    ClientInputError,
    ReviewClient,
    ReviewRequestError,
    export_markdown,
    load_text_file,
    render_report,
    validate_pasted_text,
)
from content_review.config import settings


def cmd_serve(host: str, port: int, reload: bool) -> None:
    import uvicorn

    uvicorn.run("content_review.main:app", host=host, port=port, reload=reload)


def cmd_review(file: Optional[str], text: Optional[str], url: Optional[str], export_dir: Optional[str]) -> int:
    try:
        if file:
            content = load_text_file(file)
            filename = Path(file).name
        else:
            content = validate_pasted_text(text if text is not None else sys.stdin.read())
            filename = None
    except ClientInputError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    try:
        result = ReviewClient(base_url=url).review(content, filename)
    except ReviewRequestError as e:
        hint = f" (retry after {e.retry_after}s)" if e.retry_after else ""
        print(f"ERROR: {e.message}{hint}", file=sys.stderr)
        return 1

    print(render_report(result))
    if export_dir:
        path = export_markdown(result, export_dir)
        print(f"\nSaved report to {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="content-review", description="Compliance review for marketing copy")
    sub = ap.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("serve", help="Run the review API")
    s.add_argument("--host", default=settings.HOST)
    s.add_argument("--port", type=int, default=settings.PORT)
    s.add_argument("--reload", action="store_true")

    r = sub.add_parser("review", help="Send a document for review")
    r.add_argument("file", nargs="?", help=".txt file to review (reads stdin when omitted)")
    r.add_argument("--text", help="Review this text instead of a file")
    r.add_argument("--url", default=None, help=f"Service URL (default {settings.REVIEW_API_URL})")
    r.add_argument("--export", dest="export_dir", default=None, help="Directory for the markdown export")

    args = ap.parse_args(argv)

    if args.cmd == "serve":
        cmd_serve(args.host, args.port, args.reload)
        return 0
    return cmd_review(args.file, args.text, args.url, args.export_dir)


if __name__ == "__main__":
    raise SystemExit(main())
