import pytest

from site_audit.checks import social, technologies


def labels(results):
    return [r.description for r in results]


class TestTechnologies:
    def test_server_header(self, make_page):
        results = technologies.check_technologies(make_page("<html></html>", headers={"Server": "nginx/1.25"}))

        assert results[0].title == "Server"
        assert results[0].description == "Server: nginx/1.25"

    @pytest.mark.parametrize(
        "html, expected",
        [
            ('<div id="root" data-reactroot></div>', "React detected"),
            ('<script src="/js/VUE.global.js"></script>', "Vue.js detected"),
            ("<app-root ng-version='17'></app-root><script>angular</script>", "Angular detected"),
            ('<script src="/js/jquery-3.7.1.min.js"></script>', "jQuery detected"),
            ('<link rel="stylesheet" href="/bootstrap.min.css">', "Bootstrap detected"),
            ("<style>/*! tailwindcss v3 */</style>", "Tailwind CSS detected"),
            ("<script>gtag('config', 'G-1');</script>", "Google Analytics detected"),
            ('<script src="https://connect.facebook.net/en_US/fbevents.js"></script>', "Facebook Pixel detected"),
        ],
    )
    def test_detection_table(self, make_page, html, expected):
        assert expected in labels(technologies.check_technologies(make_page(html)))

    def test_detections_keep_table_order(self, make_page):
        html = "<script src='/jquery.js'></script><script>React.render()</script>"
        assert labels(technologies.detect_technologies(make_page(html))) == ["React detected", "jQuery detected"]

    def test_all_results_pass(self, make_page):
        html = "react vue angular jquery bootstrap tailwindcss gtag fbevents"
        results = technologies.check_technologies(make_page(html, headers={"server": "Apache"}))

        assert len(results) == 9
        assert all(r.passed and r.score == 100 for r in results)

    def test_nothing_detected_is_informational(self, make_page):
        results = technologies.check_technologies(make_page("<html><body>plain</body></html>"))

        assert len(results) == 1
        assert results[0].passed is True
        assert results[0].score == 100
        assert results[0].description == "No technologies detected"

    def test_every_entry_matches_its_own_marker(self):
        for tech in technologies.TECHNOLOGIES:
            assert tech.matches(tech.markers[0], "")
            assert not tech.matches("<html></html>", "")


class TestSocialAccounts:
    def test_lists_domains_once_in_order(self, make_page):
        html = (
            '<a href="https://www.LinkedIn.com/company/acme">in</a>'
            '<a href="https://github.com/acme">gh</a>'
            '<a href="https://linkedin.com/in/founder">in</a>'
        )
        result = social.check_social_accounts(make_page(html))

        assert result.passed is True
        assert result.details == ("linkedin.com", "github.com")
        assert result.description == "Found links to: linkedin.com, github.com"

    def test_none_found(self, make_page):
        result = social.check_social_accounts(make_page('<a href="/about">About</a>'))
        assert (result.passed, result.score) == (False, 0)


class TestOpenGraph:
    def test_present(self, make_page):
        html = '<html><head><meta property="og:title" content="Acme"></head></html>'
        result = social.check_open_graph(make_page(html))

        assert (result.passed, result.score) == (True, 100)
        assert result.learn_more_url == "https://ogp.me/"

    def test_other_og_tags_do_not_count(self, make_page):
        html = '<html><head><meta property="og:image" content="/i.png"></head></html>'
        result = social.check_open_graph(make_page(html))
        assert (result.passed, result.score) == (False, 0)
