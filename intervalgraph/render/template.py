# intervalgraph/render/template.py
from __future__ import annotations

CSS_BLOCK = r"""
body { font-family: system-ui, sans-serif; margin: 24px; }
.intvg { position: relative; width: 100%; height: 20px; background-color: #e1e0eb; }
.intvg .bar { position: absolute; height: 20px; }
.intvg .bar-intv { border-right: 1px solid rgba(0, 0, 0, .15); }
.intvg .bar-date { width: 0; box-sizing: content-box; border: solid black; border-width: 0 2px; }
.intvg .bar:hover::after {
  content: attr(data-title); position: absolute; top: 24px; left: 0;
  white-space: nowrap; background: #333; color: #fff; padding: 2px 6px; font-size: 12px;
}
"""

# Rebuilds the bars from the embedded rows: 6 items per span, 2 per point.
JS_BLOCK = r"""
(function () {
  var rows = JSON.parse(document.getElementById('intvg-data').textContent);
  var root = document.getElementById('intvg-root');
  rows.forEach(function (bar, index) {
    var el = document.createElement('div');
    if (bar.length === 6) {
      el.className = 'bar bar-intv bar' + index;
      el.style.left = bar[0] + '%';
      el.style.right = bar[1] + '%';
      if (typeof bar[2] === 'string' && bar[2].charAt(0) === '#') {
        el.style.backgroundColor = bar[2];
      } else if (bar[2] !== null) {
        el.className += ' ' + bar[2];
      }
      el.dataset.title = bar[3] + ' ➔ ' + bar[4] + (bar[5] !== null ? ' : ' + bar[5] : '');
    } else if (bar.length === 2) {
      el.className = 'bar bar-date bar' + index;
      el.style.left = bar[0] + '%';
      el.dataset.title = bar[1];
    } else {
      return;
    }
    root.appendChild(el);
  });
})();
"""

HTML_TEMPLATE = r"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>__TITLE__</title>
<style>
__CSS_BLOCK__
</style>
</head>
<body>
<h1>__TITLE__</h1>
<div class="intvg" id="intvg-root"></div>
<script id="intvg-data" type="application/json">
__DATA_JSON__
</script>
<script>
__JS_BLOCK__
</script>
</body>
</html>
""".replace("__CSS_BLOCK__", CSS_BLOCK).replace("__JS_BLOCK__", JS_BLOCK)
