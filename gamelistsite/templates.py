# page templates; every page links the shared style.css copied to the root
HOME_HTML = r"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ app_title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="style.css" rel="stylesheet">
</head>
<body>
<nav class="navbar">
  <a class="brand" href="index.html">{{ app_title }}</a>
</nav>

<main class="container">
  {% if not systems %}
    <div class="empty">
      <h4>No systems found.</h4>
      <p>Add one folder per system, each with a <code>gamelist.xml</code>.</p>
    </div>
  {% else %}
  <ul class="systems">
    {% for s in systems %}
      <li class="system">
        <a href="{{ s.id|urlencode }}/index.html">
          <img class="logo" src="{{ s.logo|urlencode }}" alt="{{ s.name }}">
          <span class="title">{{ s.name }}</span>
        </a>
      </li>
    {% endfor %}
  </ul>
  {% endif %}
</main>
</body>
</html>
"""

SYSTEM_HTML = r"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ system.name }} · {{ app_title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="../style.css" rel="stylesheet">
</head>
<body>
<nav class="navbar">
  <a class="brand" href="../index.html">{{ app_title }}</a>
  <span class="crumb">{{ system.name }}</span>
</nav>

<main class="container">
  <h1>
    <img class="logo" src="../{{ system.logo|urlencode }}" alt="">
    {{ system.name }}
    <small class="count">{{ games|length }} game{{ '' if games|length == 1 else 's' }}</small>
  </h1>

  {% if not games %}
    <div class="empty">No games listed.</div>
  {% else %}
  <ul class="games">
    {% for g in games %}
      <li class="game">
        <a href="{{ g.page|urlencode }}">
          <img class="thumb" src="{{ g.thumb|urlencode }}" alt="" loading="lazy">
          <span class="title">{{ g.name }}</span>
        </a>
      </li>
    {% endfor %}
  </ul>
  {% endif %}
</main>
</body>
</html>
"""

GAME_HTML = r"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ game.name }} · {{ system.name }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="../style.css" rel="stylesheet">
</head>
<body>
<nav class="navbar">
  <a class="brand" href="../index.html">{{ app_title }}</a>
  <a class="crumb" href="index.html">{{ system.name }}</a>
</nav>

<main class="container game-page">
  <h1>{{ game.name }}</h1>
  <div class="path"><code>{{ game.path }}</code></div>

  <div class="media">
    {% if game.image_url %}
      <img class="cover" src="{{ game.image_url }}" alt="{{ game.name }}">
    {% else %}
      <img class="cover" src="{{ game.thumb|urlencode }}" alt="">
    {% endif %}
    {% if game.video_url %}
      <video class="video" src="{{ game.video_url }}" controls preload="none"></video>
    {% endif %}
  </div>

  {% set f = game.fields %}
  <dl class="facts">
    {% for key, label in facts %}
      {% if f.get(key) %}
        <dt>{{ label }}</dt><dd>{{ f[key] }}</dd>
      {% endif %}
    {% endfor %}
  </dl>

  {% if f.get('desc') %}
    <div class="desc">{{ f['desc'] }}</div>
  {% endif %}
</main>
</body>
</html>
"""
