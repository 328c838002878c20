"""site_qa.parser: parsers for HTML heads, robots.txt and sitemap indexes."""
