"""Sample pages for extraction and pipeline tests.

Every content page carries enough neutral copy (FILLER, FILLER_2) to pass
error-page detection. The filler avoids business type and feature keywords
so each page is classified by its own markup and copy only.
"""

FILLER = (
    "Gardeners across the region have spent the season testing different watering "
    "schedules for tomatoes, peppers and squash. Early results suggest that deep watering "
    "twice a week produces sturdier roots than shallow daily watering. Mulch made from "
    "shredded leaves helped the soil hold moisture through the hottest weeks of summer. "
    "Several growers also noted fewer cracked fruits when the soil stayed evenly moist."
)
FILLER_2 = (
    "Raised beds warmed faster in spring, which let seedlings go in the ground nearly two "
    "weeks sooner than usual. Compost added in autumn improved drainage in heavy clay plots "
    "and encouraged earthworms to return. Growers who rotated beans through their beds "
    "reported richer soil the following season, along with fewer pests on leafy greens."
)


def build_page(
    body: str = "",
    title: str = "Garden Notes",
    head: str = "",
    lang: str = "en",
    wrap_main: bool = True,
) -> str:
    """Wrap body markup and filler copy in a complete HTML document."""
    content = f"{body}<p>{FILLER}</p><p>{FILLER_2}</p>"
    if wrap_main:
        content = f"<main>{content}</main>"
    return (
        f'<html lang="{lang}"><head><title>{title}</title>{head}</head>'
        f"<body>{content}</body></html>"
    )


BLOG_POST_URL = "https://example.com/blog/tomato-watering-guide"
BLOG_POST_HTML = f"""
<html lang="en-US">
<head>
    <title>Tomato Watering Guide</title>
    <meta name="description" content="How often to water tomatoes through a hot summer.">
    <script type="application/ld+json">
        {{"@context": "https://schema.org", "@type": "BlogPosting", "headline": "Tomato Watering Guide"}}
    </script>
</head>
<body>
    <nav><a href="/">Home</a><a href="/blog/">Blog</a></nav>
    <main>
        <article>
            <h1>Tomato Watering Guide</h1>
            <p class="author">By Dana Reyes</p>
            <h2>How often should you water tomatoes?</h2>
            <p>Water deeply twice a week so the roots grow down toward cooler, moister soil layers.</p>
            <h2>Drip irrigation vs hand watering</h2>
            <p>Drip lines keep leaves dry, which cuts the spread of leaf spot during humid weeks.</p>
            <ul>
                <li>Check soil moisture at finger depth</li>
                <li>Water early in the morning</li>
                <li>Mulch to hold moisture</li>
            </ul>
            <p>In our trial 72% of plants on drip lines produced more fruit than plants watered by hand.</p>
            <p>{FILLER}</p>
            <p>{FILLER_2}</p>
        </article>
    </main>
</body>
</html>
"""

PAYMENT_HOMEPAGE_URL = "https://payflow.example.com/"
PAYMENT_HOMEPAGE_HTML = f"""
<html lang="en">
<head>
    <title>PayFlow | Online Payment Processing</title>
    <script type="application/ld+json">
        {{"@context": "https://schema.org", "@type": "Organization", "name": "PayFlow"}}
    </script>
</head>
<body>
    <main>
        <h1>Online payment processing for small businesses</h1>
        <p>PayFlow is a leading payment processing platform built for small businesses.
        Founded in 2015, we are based in Austin, Texas. Our team of 120 employees supports
        shops in twelve countries.</p>
        <p>Unlike Stripe, we charge no monthly fees.</p>
        <p>Our mission is to make online payments simple for every merchant.</p>
        <p>{FILLER}</p>
        <p>{FILLER_2}</p>
    </main>
</body>
</html>
"""

PRODUCT_PAGE_URL = "https://example.com/products/soaker-hose"
PRODUCT_PAGE_HTML = f"""
<html lang="en">
<head>
    <title>Soaker Hose 50 ft</title>
    <script type="application/ld+json">
        {{"@context": "https://schema.org", "@type": "Product", "name": "Soaker Hose 50 ft"}}
    </script>
</head>
<body>
    <main>
        <div class="product-info">
            <h1>Soaker Hose 50 ft</h1>
            <span class="price">$24.99</span>
            <button class="add-to-cart">Add to cart</button>
            <p>A porous rubber hose that seeps water along its full length, right at the roots.</p>
        </div>
        <p>{FILLER}</p>
        <p>{FILLER_2}</p>
    </main>
</body>
</html>
"""

DOCS_PAGE_URL = "https://example.com/docs/sensor-setup"
_CODE_SAMPLES = "".join(f"<pre><code>sensor.read({i})</code></pre>" for i in range(6))
DOCS_PAGE_HTML = f"""
<html lang="en">
<head><title>Sensor Setup</title></head>
<body>
    <main>
        <h1>Sensor Setup</h1>
        <p>The sensor API returns soil moisture readings every ten minutes.</p>
        {_CODE_SAMPLES}
        <p>{FILLER}</p>
        <p>{FILLER_2}</p>
    </main>
</body>
</html>
"""

CHALLENGE_PAGE_HTML = """
<html>
<head><title>Just a moment...</title></head>
<body><p>Checking your browser before accessing the site.</p></body>
</html>
"""
