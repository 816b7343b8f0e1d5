"""On-page SEO checks."""

from ..models import CheckResult
from . import PageContext, make_check

TITLE_MIN, TITLE_MAX = 10, 60
DESCRIPTION_MIN, DESCRIPTION_MAX = 50, 160


def check_title(page: PageContext) -> CheckResult:
    """Title length between 10 and 60 characters."""
    title = page.document.text("title")
    length = len(title)

    if TITLE_MIN <= length <= TITLE_MAX:
        return make_check(
            True, 100, "Title Tag", f"Perfect length: {length} chars", "high", "easy",
            "The title tag is the most important on-page SEO element. It appears in search results and browser tabs.",
            "You're doing great! Keep keywords near the front.",
            details=[title],
        )
    if length > 0:
        return make_check(
            False, 60, "Title Tag", f"Length is {length} chars ({TITLE_MIN}-{TITLE_MAX} recommended)", "high", "easy",
            "The title tag is the clickable headline in search results. Too long and it gets truncated, "
            "too short and it wastes the opportunity.",
            "Update your HTML head:\n"
            "```html\n<head>\n  <title>Your Keyword - Your Brand</title>\n</head>\n```\n"
            "Aim for 50-60 characters.",
            recommendation="Optimize title length.",
            details=[title],
        )
    return make_check(
        False, 0, "Title Tag", "Missing title tag", "high", "easy",
        "Without a title tag, search engines have to guess what your page is about, "
        "often showing \"Untitled\" or unrelated text.",
        "Add this inside your `<head>` tag immediately:\n```html\n<title>Primary Keyword | Brand Name</title>\n```",
        recommendation="Add a descriptive title tag.",
    )


def check_meta_description(page: PageContext) -> CheckResult:
    description = page.document.meta("description")
    length = len(description)

    if DESCRIPTION_MIN <= length <= DESCRIPTION_MAX:
        return make_check(
            True, 100, "Meta Description", f"Perfect length: {length} chars", "high", "easy",
            "Meta descriptions summarize your page content for search engines and users.",
            "Excellent. Ensure it includes a call-to-action to maximize clicks.",
            details=[description],
        )
    if length > 0:
        return make_check(
            False, 60, "Meta Description",
            f"Length is {length} chars ({DESCRIPTION_MIN}-{DESCRIPTION_MAX} recommended)", "high", "easy",
            "Meta descriptions provide a summary in search results. Under 50 chars is too vague; "
            "over 160 gets cut off.",
            "Edit your page header:\n```html\n"
            '<meta name="description" content="A brief, 160-character summary of your page content including keywords.">\n'
            "```",
            recommendation="Optimize description length.",
            details=[description],
        )
    return make_check(
        False, 0, "Meta Description", "Missing meta description", "high", "easy",
        "Missing descriptions mean search engines pull random text from your page, which looks messy in results.",
        "Add this to your `<head>`:\n```html\n"
        '<meta name="description" content="Buy the best widgets online. Free shipping on all orders.">\n```',
        recommendation="Add a meta description to improve CTR.",
    )


def check_headings(page: PageContext) -> CheckResult:
    """Exactly one H1."""
    h1s = page.document.find_all("h1")
    count = len(h1s)

    if count == 1:
        heading = h1s[0].get_text(strip=True)
        return make_check(
            True, 100, "Headings", "Exactly one H1 tag found.", "medium", "easy",
            "H1 tags indicate the main topic of your page. Having exactly one helps search engines "
            "understand the primary subject.",
            "Perfect structure.",
            details=[heading[:50] + ("..." if len(heading) > 50 else "")],
        )
    return make_check(
        False, 50, "Headings", f"Found {count} H1 tags", "medium", "easy",
        "A page should have exactly one H1 tag to signal the main topic. Multiple H1s dilute relevance.",
        "**Fix:**\n"
        "1. Find your main title and wrap it in `<h1>...</h1>`.\n"
        "2. Change other headings (subtitles) to `<h2>`, `<h3>`, etc.",
        recommendation="Use exactly one H1 tag per page.",
        details=[f"H1 count: {count}"],
    )


def check_canonical(page: PageContext) -> CheckResult:
    canonical = page.document.select_one('link[rel~="canonical" i]')
    if canonical is not None:
        href = (canonical.get("href") or "").strip()
        return make_check(
            True, 100, "Canonical Tag", "Canonical tag is present.", "medium", "medium",
            "Canonical tags tell search engines which URL is the main version of this page, "
            "preventing duplicate content penalties.",
            "Good job.",
            details=[href] if href else [],
        )
    return make_check(
        False, 0, "Canonical Tag", "Missing canonical tag", "medium", "medium",
        "If users can reach your site via `http`, `https`, `www` and `non-www`, "
        "search engines see four duplicate sites.",
        "Add this to your `<head>`:\n```html\n"
        '<link rel="canonical" href="https://example.com/current-page" />\n```',
        recommendation="Add a canonical tag to prevent duplicate content.",
    )


def check_robots_meta(page: PageContext) -> CheckResult:
    """Informational: always passes."""
    robots = page.document.meta("robots")
    if robots:
        return make_check(
            True, 100, "Robots Meta Tag", f"Robots meta tag found: {robots}", "medium", "easy",
            "The robots meta tag controls how search engines crawl and index your page.",
            "Verify that the directives (index, follow) match your intentions.",
            details=[robots],
        )
    return make_check(
        True, 100, "Robots Meta Tag", "No robots meta tag (defaults to index, follow)", "medium", "easy",
        "Without a robots meta tag, search engines default to indexing the page and following links.",
        "No action needed unless you want to hide this page.",
    )


def check_sitemap_link(page: PageContext) -> CheckResult:
    """Soft signal: a missing link never fails since robots.txt is not fetched."""
    found = page.document.select('a[href*="sitemap.xml" i], a[href*="sitemap.html" i]')
    if found:
        return make_check(
            True, 100, "Sitemap Link", "Sitemap link detected in HTML", "low", "easy",
            "Linking to a sitemap helps users and crawlers navigate your site.",
            "Ensure your sitemap is also submitted to Google Search Console.",
            details=[(a.get("href") or "").strip() for a in found[:5]],
        )
    return make_check(
        True, 0, "Sitemap Link", "No sitemap link found in HTML (check robots.txt)", "low", "easy",
        "A sitemap helps index your content. It is usually linked in the footer or declared in robots.txt.",
        "Ensure you have a line in your `robots.txt`:\n```\nSitemap: https://example.com/sitemap.xml\n```",
        recommendation="Ensure you have a sitemap.xml and it is referenced in your robots.txt.",
    )


def check_structured_data(page: PageContext) -> CheckResult:
    scripts = page.document.select('script[type="application/ld+json" i]')
    if scripts:
        return make_check(
            True, 100, "Structured Data", "Schema.org (JSON-LD) detected.", "high", "hard",
            "Structured data helps search engines understand your content and can lead to rich snippets "
            "(stars, prices, etc.) in results.",
            "Validate your schema using Google's Rich Results Test tool.",
            details=[f"JSON-LD blocks: {len(scripts)}"],
            learn_more_url="https://search.google.com/test/rich-results",
        )
    return make_check(
        False, 0, "Structured Data", "No Schema.org data detected", "high", "hard",
        "Structured data lets you give search engines explicit clues about the meaning of a page.",
        "Add a script tag to your page:\n```html\n"
        '<script type="application/ld+json">\n'
        "{\n"
        '  "@context": "https://schema.org",\n'
        '  "@type": "Organization",\n'
        f'  "url": "{page.url}",\n'
        '  "logo": "https://www.example.com/logo.png"\n'
        "}\n"
        "</script>\n```",
        recommendation="Implement Schema.org structured data.",
        learn_more_url="https://schema.org/docs/gs.html",
    )


def check_image_alt(page: PageContext) -> CheckResult:
    images = page.document.find_all("img")
    missing = [img for img in images if not (img.get("alt") or "").strip()]

    if not images:
        return make_check(
            True, 100, "Image Alt Attributes", "No images found.", "medium", "easy",
            "Images enrich content, but having none is not an error.",
            "Consider adding visual content.",
        )
    if not missing:
        return make_check(
            True, 100, "Image Alt Attributes", "All images have alt text.", "medium", "easy",
            "Alt text describes images to search engines and screen readers.",
            "Keep alt text descriptive and relevant.",
            details=[f"Images: {len(images)}"],
        )
    return make_check(
        False, 0, "Image Alt Attributes", f"{len(missing)} images missing alt text", "medium", "easy",
        "Search engines cannot 'see' images. They rely on the alt attribute to understand the image context.",
        "Find your `<img>` tags and add the alt attribute:\n```html\n"
        '<!-- Bad -->\n<img src="dog.jpg">\n\n'
        '<!-- Good -->\n<img src="dog.jpg" alt="A golden retriever playing fetch">\n```',
        recommendation="Add alt text to all images.",
        details=[(img.get("src") or "(inline image)") for img in missing[:5]],
    )


def check_links(page: PageContext) -> CheckResult:
    """Informational link count. Internal = root-relative or containing our hostname."""
    links = page.document.find_all("a")
    hostname = page.hostname
    internal = 0
    for link in links:
        href = (link.get("href") or "").strip()
        if href.startswith("/") or (hostname and hostname in href.lower()):
            internal += 1

    return make_check(
        True, 100, "Link Analysis", f"Found {len(links)} total links", "low", "medium",
        "Links determine the structure of your site and how value flows between pages.",
        "Ensure a healthy ratio of internal to external links.",
        details=[f"Internal: {internal}", f"External: {len(links) - internal}"],
    )


SEO_CHECKS = (
    check_title,
    check_meta_description,
    check_headings,
    check_canonical,
    check_robots_meta,
    check_sitemap_link,
    check_structured_data,
    check_image_alt,
    check_links,
)
