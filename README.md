# sitecrawler

`sitecrawler` crawls a website, following links that stay on the same host
(port included), and prints the resulting site map as an indented tree. The
map can also be exported to a JSON or XML file. It needs nothing beyond the
Python standard library.

## Installation

```
pip install .
```

## Usage

```
sitecrawler [URL] [options]
```

If no URL is given, `https://example.com` is crawled. A URL that does not
start with `http://` or `https://` gets `https://` put in front of it.

| Option | Default | Meaning |
| --- | --- | --- |
| `-o`, `--output FILE` | (none) | Export the site map to `FILE` |
| `-f`, `--format FORMAT` | `json` | Export format: `json` or `xml` |
| `-d`, `--depth N` | `10` | Maximum crawl depth; negative values are rejected |
| `-c`, `--concurrency N` | `10` | Accepted for compatibility; pages are fetched one at a time |
| `-v`, `--version` | | Print `website-crawler version 1.0.0` and exit |

Example:

```
sitecrawler example.com --depth 2 --output map.json
```

While crawling, progress lines (links collected, children added, fetch
errors, and a one-line dump of the final map) are printed to standard output.
After that the command reports the time the crawl took, the HTTP status and
response time of the start page, and the site map:

```
[✓] Site: https://example.com

Status: 200 OK
Response Time: 42ms

Site Map:

- https://example.com
  - https://example.com/about
  - https://example.com/contact
```

The status line always ends in `OK`, whatever the code is.

Each page is visited once. Links are taken from `href` attributes of `<a>`
elements, resolved against the page's URL, and followed while the page's depth
is below the maximum depth; the start page has depth 0.

An unreachable start page, a negative depth or an export failure ends the
command with an `Error: ...` line on standard error and exit status 1. The
export happens after the crawl, so an unsupported `--format` is reported only
once the site has been crawled and printed.

## Export formats

- `json`: an indented object with `url`, `depth` and `children`; a page
  without children has `"children": null`. `<`, `>` and `&` are written as
  `\u003c`, `\u003e` and `\u0026`.
- `xml`: a `<SiteMap>` root holding `<URL>`, `<Depth>` and one nested
  `<Children>` element per child page, indented by two spaces.

## Library use

```python
import sys

from sitecrawler.crawler import crawl_website
from sitecrawler.sitemap import export_site_map, print_site_map

status, response_ms, site_map = crawl_website("https://example.com", 2, 4)
print_site_map(site_map, sys.stdout)
export_site_map(site_map, "map.xml", "xml")
```

- `sitecrawler.crawler.crawl_website(base_url, max_depth, concurrency=1)`
  returns `(status_code, response_time_ms, SiteMap)` and raises
  `sitecrawler.crawler.CrawlError` when the depth is negative or the site
  cannot be reached. `find_links` and `is_same_domain` are available as well.
- `sitecrawler.sitemap.SiteMap` is a dataclass with `url`, `depth` and
  `children`, and the methods `dump()`, `to_dict()` and `to_xml()`.
  `export_site_map` raises `ValueError` for a missing map or an unknown format.
- `sitecrawler.httpclient.check_website(url)` returns the status code and
  response time in milliseconds, or `(0, 0)` when the site is unreachable.
- `sitecrawler.cli.run(argv, stdout, stderr)` runs the command and returns its
  exit status.

## What it does not do

- robots.txt is fetched (`sitecrawler.robots.is_allowed`), but its rules are
  not interpreted: every URL is treated as allowed. Setting the environment
  variable `TESTING=true` skips the fetch altogether.
- Pages are crawled sequentially; `--concurrency` does not start parallel
  workers.