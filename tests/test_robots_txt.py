import pytest

from purplekit.robots_txt import DirectiveType, RobotsTxt, RobotsTxtRule, UserAgentBlock

CONTENT_1 = """
# This is a comment
User-agent: Googlebot
Disallow: /private/
Allow: /private/public-data/
Disallow: /admin/
Crawl-delay: 10
Host: example.com

User-agent: *
Disallow: /temp/
Allow: /
Crawl-delay: 5

Sitemap: https://www.example.com/sitemap.xml
Sitemap: https://www.example.com/another-sitemap.xml
    """

CONTENT_2 = """
User-agent: TestBot
Disallow: /folder/file.html
Allow: /folder/
Disallow: /path/$
Allow: /path
    """

CONTENT_3 = """
User-agent: EvilBot
Disallow: /
    """


@pytest.fixture
def robots1():
    return RobotsTxt.parse(CONTENT_1)


def test_parse_blocks(robots1):
    blocks = robots1.user_agent_blocks
    assert len(blocks) == 2
    assert blocks[0].user_agents == {"Googlebot"}
    assert blocks[0].rules == [
        RobotsTxtRule(DirectiveType.DISALLOW, "/private/"),
        RobotsTxtRule(DirectiveType.ALLOW, "/private/public-data/"),
        RobotsTxtRule(DirectiveType.DISALLOW, "/admin/"),
    ]
    assert blocks[0].crawl_delay == "10"
    assert blocks[0].host == "example.com"
    assert blocks[1].user_agents == {"*"}
    assert blocks[1].crawl_delay == "5"
    assert blocks[1].host == ""


def test_parse_sitemaps(robots1):
    assert robots1.sitemaps == {
        "https://www.example.com/sitemap.xml",
        "https://www.example.com/another-sitemap.xml",
    }


@pytest.mark.parametrize(
    "agent, path, expected",
    [
        ("Googlebot", "/private/", False),
        ("Googlebot", "/private/public-data/", True),
        ("Googlebot", "/admin/", False),
        ("Googlebot", "/", True),
        ("Googlebot", "/temp/", True),
        ("UnknownBot", "/temp/", False),
        ("UnknownBot", "/", True),
        ("UnknownBot", "/private/", True),
        ("MyCustomBot", "/any-path/", True),
    ],
)
def test_path_allowance_example_1(robots1, agent, path, expected):
    assert robots1.is_path_allowed(agent, path) is expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/folder/file.html", False),
        ("/folder/another.html", True),
        ("/path", True),
        ("/path/", True),
        ("/path/sub", True),
    ],
)
def test_path_allowance_example_2(path, expected):
    robots = RobotsTxt.parse(CONTENT_2)
    assert robots.is_path_allowed("TestBot", path) is expected


@pytest.mark.parametrize("path", ["/", "/any-path"])
def test_disallow_everything(path):
    robots = RobotsTxt.parse(CONTENT_3)
    assert robots.is_path_allowed("EvilBot", path) is False
    assert robots.is_path_allowed("OtherBot", path) is True


def test_no_blocks_allows_everything():
    assert RobotsTxt.parse("").is_path_allowed("AnyBot", "/x") is True


def test_dollar_anchor_matches_exact_path():
    robots = RobotsTxt.parse("User-agent: *\nDisallow: /a$b$\n")
    assert robots.is_path_allowed("x", "/a$b") is True
    assert robots.is_path_allowed("x", "/a$b$") is True
    robots = RobotsTxt.parse("User-agent: *\nDisallow: /a$\n")
    assert robots.is_path_allowed("x", "/a$") is True
    assert robots.is_path_allowed("x", "/a") is True


def test_rules_outside_block_ignored():
    robots = RobotsTxt.parse("Disallow: /x\nHost: example.com\nSitemap: https://example.com/s.xml\n")
    assert robots.user_agent_blocks == []
    assert robots.sitemaps == {"https://example.com/s.xml"}


def test_directives_are_case_insensitive():
    robots = RobotsTxt.parse("USER-AGENT: bot\nDISALLOW: /x\n")
    assert robots.user_agent_blocks[0].user_agents == {"bot"}
    assert robots.is_path_allowed("bot", "/x/y") is False


def test_consecutive_user_agents_open_separate_blocks():
    robots = RobotsTxt.parse("User-agent: a\nUser-agent: b\nDisallow: /\n")
    assert [b.user_agents for b in robots.user_agent_blocks] == [{"a"}, {"b"}]
    assert robots.user_agent_blocks[0].rules == []
    assert robots.is_path_allowed("a", "/") is True
    assert robots.is_path_allowed("b", "/") is False


def test_build_simple_document():
    robots = RobotsTxt(
        user_agent_blocks=[
            UserAgentBlock(
                user_agents={"*"},
                rules=[RobotsTxtRule(DirectiveType.DISALLOW, "/temp/")],
            )
        ],
        sitemaps={"https://www.example.com/sitemap.xml"},
    )
    assert robots.build() == (
        "User-agent: *\nDisallow: /temp/\n\n"
        "Sitemap: https://www.example.com/sitemap.xml\n"
    )


def test_build_includes_delay_and_host(robots1):
    text = robots1.build()
    assert "Crawl-delay: 10\n" in text
    assert "Host: example.com\n" in text
    assert text.index("User-agent: Googlebot") < text.index("User-agent: *")


def test_round_trip(robots1):
    assert RobotsTxt.parse(robots1.build()) == robots1


def test_equality_detects_differences(robots1):
    other = RobotsTxt.parse(CONTENT_1)
    assert other == robots1
    other.user_agent_blocks[0].crawl_delay = "99"
    assert not (other == robots1)