"""
Sample pages and text builders shared by the tests.
"""

BASE_URL = "https://example.com/posts/generators"

# 13 words, free of any boilerplate line pattern
SENTENCE = "The quick brown fox jumps over the lazy dog near the river bank."


def words_paragraph(repeat: int) -> str:
    """A paragraph of ``13 * repeat`` words."""
    return " ".join([SENTENCE] * repeat)


ARTICLE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Understanding Python Generators</title>
  <meta name="description" content="A practical guide to generators.">
  <meta name="keywords" content="python, generators">
  <meta name="author" content="Jane Doe">
  <meta property="article:published_time" content="2024-03-01T10:00:00Z">
  <meta property="og:site_name" content="Example Blog">
  <meta property="og:title" content="Generators in Python">
  <meta property="og:description" content="Lazy sequences explained.">
  <meta property="og:image" content="/static/cover.png">
  <link rel="canonical" href="/posts/generators">
  <script>window.analytics = {enabled: true};</script>
</head>
<body>
  <header class="site-header">
    <nav><a href="/">Home</a> <a href="/about">About</a> <a href="/archive">Archive</a></nav>
  </header>
  <div class="cookie-banner">Accept all cookies</div>
  <article>
    <h1>Understanding Python Generators</h1>
    <p>Generators let a function produce a sequence of values over time instead of computing
    them all at once. Each call to next resumes the function right after the last yield
    statement, which keeps memory usage small even for very large inputs. This makes them a
    natural fit for streaming data from files, sockets and databases.</p>
    <h2>Lazy evaluation</h2>
    <p>Because values are computed on demand, a generator can describe an infinite sequence
    without ever running out of memory. The caller decides how many items to take, and the
    generator simply pauses between requests. Lazy evaluation also means that expensive work
    is skipped entirely when the consumer stops early.</p>
    <pre><code class="language-python">def count_up(limit):
    n = 0
    while n &lt; limit:
        yield n
        n += 1</code></pre>
    <h2>Pipelines</h2>
    <p>Chaining generators builds memory friendly pipelines. See the guide on
    <a href="/posts/iterators">iterators</a>, the official
    <a href="https://docs.python.org/3/">documentation</a> and the
    <a href="/posts/itertools">itertools recipes</a> for more examples.</p>
    <img src="/img/diagram.png" alt="Generator diagram">
  </article>
  <footer>Copyright Example Blog</footer>
</body>
</html>
"""
