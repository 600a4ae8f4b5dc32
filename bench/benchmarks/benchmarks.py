# Write the benchmarking functions here.
# See "Writing benchmarks" in the asv docs for more information.

import hyperplug

REALISTIC_REQUEST_HEADERS = (
    b"Host: example.com\r\n"
    b"User-Agent: Mozilla/5.0 (X11; Linux x86_64; "
    b"rv:45.0) Gecko/20100101 Firefox/45.0\r\n"
    b"Accept: text/html,application/xhtml+xml,"
    b"application/xml;q=0.9,*/*;q=0.8\r\n"
    b"Accept-Language: en-US,en;q=0.5\r\n"
    b"Accept-Encoding: gzip, deflate, br\r\n"
    b"DNT: 1\r\n"
    b"Cookie: ID=AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    b"AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    b"AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    b"AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    b"AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA\r\n"
    b"Connection: keep-alive\r\n\r\n"
)

REALISTIC_RESPONSE_HEADERS = [
    ("Cache-Control", "private, max-age=0"),
    ("Content-Encoding", "gzip"),
    ("Content-Type", "text/html; charset=UTF-8"),
    ("Date", "Fri, 20 May 2016 09:23:41 GMT"),
    ("Expires", "-1"),
    ("Server", "gws"),
    ("Set-Cookie", "NID=79=abc; expires=Sat, 19-Nov-2016 09:23:41 GMT"),
    ("Set-Cookie", "1P_JAR=2016-05-20-09; path=/; domain=.example.com"),
    ("X-Frame-Options", "SAMEORIGIN"),
    ("X-XSS-Protection", "1; mode=block"),
    ("Content-Length", "1000"),
]


# Basic ASV benchmark of core functionality
def time_parse_realistic_request_headers():
    hyperplug.Headers.from_raw_headers(REALISTIC_REQUEST_HEADERS)


def time_parse_realistic_request_headers_with_comma_separation():
    hyperplug.Headers.from_raw_headers(
        REALISTIC_REQUEST_HEADERS, raw_comma_separation=True
    )


def time_build_and_serialize_realistic_response_headers():
    headers = hyperplug.Headers(REALISTIC_RESPONSE_HEADERS)
    headers.to_bytes()


# Useful for manual benchmarking, e.g. with vmprof or on PyPy
def _run_headers_repeatedly():
    from timeit import default_timer

    REPEAT = 10000
    # while True:
    for _ in range(7):
        start = default_timer()
        for _ in range(REPEAT):
            time_parse_realistic_request_headers()
            time_build_and_serialize_realistic_response_headers()
        finish = default_timer()
        print("{:.1f} requests/sec".format(REPEAT / (finish - start)))


if __name__ == "__main__":
    _run_headers_repeatedly()
