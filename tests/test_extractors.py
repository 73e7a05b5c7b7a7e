import pytest

from price_engine.scrapers import (
    detect_platform,
    extract,
    get_extractor_for_platform,
    get_extractor_for_url,
    get_supported_platforms,
)
from price_engine.scrapers.base import parse_rating, parse_review_count
from price_engine.scrapers.platforms import AmazonExtractor, FlipkartExtractor, GenericExtractor

AMAZON_PRODUCT_PAGE = """
<html><body>
  <span id="productTitle">
      Dell Inspiron 15 Laptop, 16GB RAM
  </span>
  <span class="a-price a-text-price a-size-medium apexPriceToPay"><span class="a-offscreen">₹45,999</span></span>
  <span class="a-text-strike"><span class="a-offscreen">₹65,999</span></span>
  <span id="acrPopover"><span class="a-icon-alt">4.3 out of 5 stars</span></span>
  <span id="acrCustomerReviewText">1,234 ratings</span>
  <div id="feature-bullets"><ul>
    <li><span>Intel Core i5 12th Gen processor</span></li>
    <li><span>Short</span></li>
  </ul></div>
</body></html>
"""

AMAZON_SEARCH_PAGE = """
<html><body>
  <div data-component-type="s-search-result">
    <h2><a href="/Dell-Inspiron-Laptop/dp/B0TEST1234"><span>Dell Inspiron 15 Laptop</span></a></h2>
    <span class="a-price"><span class="a-offscreen">₹44,990</span></span>
  </div>
  <div data-component-type="s-search-result">
    <h2><a href="/Other/dp/B0OTHER"><span>Some Other Laptop</span></a></h2>
    <span class="a-price"><span class="a-offscreen">₹99,990</span></span>
  </div>
</body></html>
"""

FLIPKART_PRODUCT_PAGE = """
<html><body>
  <span class="VU-ZEz">Samsung Galaxy S23 5G</span>
  <div class="Nx9bqj CxhGGd">₹54,999</div>
  <div class="yRaY8j">₹74,999</div>
  <div class="XQDdHH">4.5</div>
</body></html>
"""

FLIPKART_SEARCH_PAGE = """
<html><body>
  <div data-id="MOBGTAGPAQNVFZZY">
    <a class="CGtC98" href="/samsung-galaxy-s23/p/itm123">
      <div class="KzDlHZ">Samsung Galaxy S23 5G</div>
      <div class="Nx9bqj">₹52,999</div>
    </a>
  </div>
</body></html>
"""

GENERIC_PRODUCT_PAGE = """
<html><body>
  <h1>Hydrating Face Cream 50ml</h1>
  <meta itemprop="price" content="499">
  <span class="mrp">₹799</span>
  <ul class="features"><li>Hyaluronic acid</li><li>SPF</li></ul>
</body></html>
"""


def test_amazon_product_page():
    product = AmazonExtractor().extract(AMAZON_PRODUCT_PAGE, "https://www.amazon.in/dp/B0TEST1234")

    assert product.platform == "Amazon"
    assert product.name == "Dell Inspiron 15 Laptop, 16GB RAM"
    assert product.price.amount == 45999.0
    assert product.list_price.amount == 65999.0
    assert product.rating == 4.3
    assert product.review_count == 1234
    assert product.features == ["Intel Core i5 12th Gen processor"]
    assert product.delivery_estimate is None
    assert product.url == "https://www.amazon.in/dp/B0TEST1234"


def test_flipkart_product_page():
    product = FlipkartExtractor().extract(FLIPKART_PRODUCT_PAGE)

    assert product.name == "Samsung Galaxy S23 5G"
    assert product.price.amount == 54999.0
    assert product.list_price.amount == 74999.0
    assert product.rating == 4.5


def test_generic_product_page():
    product = GenericExtractor("shop.example.com").extract(GENERIC_PRODUCT_PAGE)

    assert product.platform == "shop.example.com"
    assert product.name == "Hydrating Face Cream 50ml"
    assert product.price.amount == 499.0
    assert product.list_price.amount == 799.0
    assert product.availability == "Available"
    assert product.features == ["Hyaluronic acid"]


def test_list_price_not_above_selling_price_is_absent():
    markup = FLIPKART_PRODUCT_PAGE.replace("₹74,999", "₹54,999")
    assert FlipkartExtractor().extract(markup).list_price is None


@pytest.mark.parametrize("markup", [
    "",
    "<html><body><p>Nothing to see</p></body></html>",
    # Name without a price
    '<html><body><span id="productTitle">Dell Laptop</span></body></html>',
    # Price without a name
    '<html><body><span class="a-price"><span class="a-offscreen">₹45,999</span></span></body></html>',
])
def test_amazon_extraction_miss(markup):
    assert AmazonExtractor().extract(markup) is None


def test_long_names_are_truncated():
    markup = AMAZON_PRODUCT_PAGE.replace("Dell Inspiron 15 Laptop, 16GB RAM", "Laptop " * 40)
    assert len(AmazonExtractor().extract(markup).name) == 150


def test_features_are_capped():
    items = "".join(f"<li><span>Feature number {i} of the laptop</span></li>" for i in range(15))
    markup = AMAZON_PRODUCT_PAGE.replace("<li><span>Short</span></li>", items)
    assert len(AmazonExtractor().extract(markup).features) == 10


def test_amazon_search_takes_first_result():
    search_url = AmazonExtractor().build_search_url("dell laptop")
    product = AmazonExtractor().extract_search_result(AMAZON_SEARCH_PAGE, search_url)

    assert product.name == "Dell Inspiron 15 Laptop"
    assert product.price.amount == 44990.0
    assert product.url == "https://www.amazon.in/Dell-Inspiron-Laptop/dp/B0TEST1234"


def test_flipkart_search_result_link():
    product = FlipkartExtractor().extract_search_result(FLIPKART_SEARCH_PAGE)

    assert product.name == "Samsung Galaxy S23 5G"
    assert product.price.amount == 52999.0
    assert product.url == "https://www.flipkart.com/samsung-galaxy-s23/p/itm123"


def test_search_result_without_link_keeps_search_url():
    markup = AMAZON_SEARCH_PAGE.replace('href="/Dell-Inspiron-Laptop/dp/B0TEST1234"', "")
    markup = markup.replace('href="/Other/dp/B0OTHER"', "")
    product = AmazonExtractor().extract_search_result(markup, "https://www.amazon.in/s?k=dell")
    assert product.url == "https://www.amazon.in/s?k=dell"


def test_search_page_without_results():
    assert AmazonExtractor().extract_search_result("<html><body></body></html>") is None
    assert GenericExtractor().extract_search_result(GENERIC_PRODUCT_PAGE) is None


def test_build_search_url_quotes_terms():
    assert AmazonExtractor().build_search_url("dell laptop") == \
        "https://www.amazon.in/s?k=dell%20laptop&ref=nb_sb_noss"
    assert GenericExtractor().build_search_url("anything") is None


@pytest.mark.parametrize("url, platform", [
    ("https://www.amazon.in/Dell-Laptop/dp/B0TEST1234", "Amazon"),
    ("https://amzn.in/d/abc", "Amazon"),
    ("https://www.flipkart.com/samsung-galaxy-s23/p/itm123", "Flipkart"),
    ("https://www.myntra.com/shirts/roadster/123/buy", "Myntra"),
    ("https://www.reliancedigital.in/some-tv/p/491", "Reliance Digital"),
    ("https://www.shop.example.com/item/42", "shop.example.com"),
])
def test_detect_platform(url, platform):
    assert detect_platform(url) == platform


def test_extractor_lookup():
    assert isinstance(get_extractor_for_platform("amazon"), AmazonExtractor)
    assert isinstance(get_extractor_for_url("https://www.flipkart.com/x/p/1"), FlipkartExtractor)

    fallback = get_extractor_for_platform("Tiny Shop")
    assert isinstance(fallback, GenericExtractor)
    assert fallback.platform_name == "Tiny Shop"


def test_module_level_extract():
    assert extract(FLIPKART_PRODUCT_PAGE, "Flipkart").price.amount == 54999.0


def test_supported_platforms():
    platforms = get_supported_platforms()
    assert platforms == sorted(platforms)
    assert {"Amazon", "Flipkart", "Myntra", "Reliance Digital"} <= set(platforms)


def test_parse_rating_and_reviews():
    assert parse_rating("4.3 out of 5 stars") == 4.3
    assert parse_rating("4.1 ★") == 4.1
    assert parse_rating("12") is None
    assert parse_review_count("12,345 global ratings") == 12345
    assert parse_review_count("no reviews yet") is None
