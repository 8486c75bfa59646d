"""Export the flattened field table of a running site API as CSV."""
import argparse, os, sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from site_admin.core.sync import SyncController
from site_admin.core.view import fields_frame
from ui.api_client import ApiClient


def main():
    p = argparse.ArgumentParser()
    p.add_argument('-Api', type=str, default=None, help='Base URL, defaults to SITE_API_BASE')
    p.add_argument('-Out', type=str, default='site_fields.csv')
    a = p.parse_args()

    ctl = SyncController(ApiClient(base_url=a.Api))
    if not ctl.reload():
        sys.exit(ctl.load_error)
    df = fields_frame(ctl.fields)
    df.to_csv(a.Out, index=False)
    print(f"Wrote {len(df)} fields -> {a.Out}")


if __name__ == '__main__':
    main()
