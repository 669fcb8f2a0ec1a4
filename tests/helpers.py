import json
import httpx


TEA_HTML = """
<html><head><title>Tea | Example Kitchen</title></head>
<body>
<script type="application/ld+json">{"@type":"Recipe","name":"Tea","recipeIngredient":["1 bag tea","1 cup water"],"recipeInstructions":["Boil water","Steep bag"],"prepTime":"PT2M","cookTime":"PT3M","recipeYield":"1"}</script>
</body></html>
"""

MARKUP_HTML = """
<html><head>
<title>Grandma's Stew | Cozy Recipes</title>
<meta name="description" content="A stew for cold nights &amp; lazy Sundays">
</head><body>
<h1 class="entry-title">Grandma&#39;s <em>Beef</em> Stew | Cozy Recipes</h1>
<ul>
  <li class="wprm-recipe-ingredient"><span>2 lb</span> beef chuck</li>
  <li class="wprm-recipe-ingredient">3&nbsp;carrots</li>
</ul>
<ol>
  <li class="recipe-instruction">Brown the beef.</li>
  <li class="recipe-instruction">Add carrots &amp; simmer.</li>
  <li class="recipe-instruction">Serve.</li>
</ol>
</body></html>
"""


def mock_http_client(handler) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by `handler(request)`."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def generation_response(recipe: dict, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps({"coverLetter": recipe}).encode("utf-8"))
