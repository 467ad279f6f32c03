#!/usr/bin/env python3
"""Benchmark the review flow: upload, move into review, then one sync pass.

Usage:
  export API_URL=http://localhost:8000
  python scripts/bench_upload.py [--num-docs 100] [--content-size 500]
"""
from __future__ import annotations

import argparse
import base64
import os
import statistics
import sys
import time

import httpx


def _percentiles(latencies: list[float]) -> tuple[float, float, float]:
    n = len(latencies)
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95
    return p50, p95, p99


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark document upload and review")
    parser.add_argument("--num-docs", type=int, default=50, help="Number of documents to upload")
    parser.add_argument("--content-size", type=int, default=2000, help="Bytes per text document")
    parser.add_argument("--output", type=str, default="results/bench_upload.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    upload_latencies: list[float] = []
    status_latencies: list[float] = []
    errors = 0

    print(f"Uploading {args.num_docs} documents (~{args.content_size} bytes each)...")
    start_total = time.perf_counter()
    with httpx.Client(base_url=api_url, timeout=60.0) as client:
        for i in range(args.num_docs):
            payload = (b"x" * args.content_size) + f" doc_{i}".encode()
            t0 = time.perf_counter()
            r = client.post(
                "/v1/documents",
                json={
                    "file_name": f"bench_{i}.txt",
                    "mime_type": "text/plain",
                    "content": base64.b64encode(payload).decode(),
                    "title": f"Bench document {i}",
                },
            )
            upload_latencies.append(time.perf_counter() - t0)
            if r.status_code != 201:
                errors += 1
                continue

            t0 = time.perf_counter()
            r = client.post(
                f"/v1/documents/{r.json()['id']}/status",
                json={"status": "in_review", "notes": "bench"},
            )
            status_latencies.append(time.perf_counter() - t0)
            if r.status_code != 200:
                errors += 1

        t0 = time.perf_counter()
        sync = client.post("/v1/sync")
        sync_elapsed = time.perf_counter() - t0
    total_elapsed = time.perf_counter() - start_total

    if not upload_latencies:
        print("No uploads attempted.")
        return 1

    up50, up95, up99 = _percentiles(upload_latencies)
    summary = (
        f"Review benchmark (n={len(upload_latencies)}, errors={errors})\n"
        f"  Upload latency: p50={up50:.1f} ms, p95={up95:.1f} ms, p99={up99:.1f} ms\n"
    )
    if status_latencies:
        st50, st95, st99 = _percentiles(status_latencies)
        summary += f"  Status latency: p50={st50:.1f} ms, p95={st95:.1f} ms, p99={st99:.1f} ms\n"
    summary += (
        f"  Sync pass: HTTP {sync.status_code} in {sync_elapsed * 1000:.1f} ms ({sync.json()})\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
