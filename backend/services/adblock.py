"""Client-side ad blocker injected into every player page.

The framed third-party hosts are popup-heavy. The script runs in the outer
page and blocks what it can reach from there: popups, new tabs, popunders,
ad script/iframe injection and ad-like DOM nodes outside the player.
"""

import json

# Substrings matched case-insensitively against script/iframe sources and
# document.write content.
BLOCK_LIST = [
    "doubleclick",
    "googlesyndication",
    "googleadservices",
    "adservice",
    "advertising",
    "adserver",
    "/ads/",
    "popunder",
    "popup",
    "pop-up",
]

AD_SELECTORS = [
    '[class*="ad-"]',
    '[id*="ad-"]',
    '[class*="ads"]',
    '[id*="ads"]',
    '[class*="banner"]',
    '[class*="popup"]',
    '[class*="overlay"]:not([class*="player"])',
    'iframe[src*="doubleclick"]',
    'iframe[src*="googlesyndication"]',
    'iframe[src*="advertising"]',
]

_SCRIPT = """
(function() {
  'use strict';

  var blockList = __BLOCK_LIST__;
  var adSelectors = __AD_SELECTORS__;

  function isBlocked(value) {
    if (!value) return false;
    var lower = String(value).toLowerCase();
    return blockList.some(function(pattern) { return lower.indexOf(pattern) !== -1; });
  }

  window.open = function() {
    console.log('[AdBlock] Blocked popup window');
    return null;
  };

  window.addEventListener('click', function(e) {
    if (e.target.tagName === 'A' && e.target.target === '_blank') {
      e.preventDefault();
      e.stopPropagation();
      console.log('[AdBlock] Blocked new tab');
      return false;
    }
  }, true);

  window.addEventListener('blur', function(e) {
    if (document.activeElement && document.activeElement.tagName === 'IFRAME') {
      e.stopImmediatePropagation();
    }
  }, true);

  window.addEventListener('beforeunload', function(e) {
    e.preventDefault();
    e.stopPropagation();
    return undefined;
  }, true);

  var originalDocWrite = document.write;
  document.write = function(content) {
    if (isBlocked(content)) return;
    return originalDocWrite.apply(document, arguments);
  };

  var originalCreateElement = document.createElement;
  document.createElement = function(tagName) {
    var element = originalCreateElement.call(document, tagName);
    var tag = String(tagName).toLowerCase();
    if (tag === 'script' || tag === 'iframe') {
      var originalSetAttribute = element.setAttribute;
      element.setAttribute = function(name, value) {
        if (name === 'src' && isBlocked(value)) return;
        return originalSetAttribute.apply(element, arguments);
      };
    }
    return element;
  };

  function removeAds() {
    adSelectors.forEach(function(selector) {
      try {
        document.querySelectorAll(selector).forEach(function(el) {
          if (el.id === 'videoFrame' || el.closest('[class*="player"]')) return;
          el.remove();
        });
      } catch (e) {}
    });
  }

  document.addEventListener('DOMContentLoaded', removeAds);
  setInterval(removeAds, 1000);

  document.addEventListener('contextmenu', function(e) {
    if (e.target.tagName === 'IFRAME' && isBlocked(e.target.src)) {
      e.preventDefault();
      return false;
    }
  }, true);

  console.log('[Embed] Ad-blocking initialized');
})();
"""


def adblock_script() -> str:
    """Return the blocker script with the block list and selectors inlined."""
    # json.dumps output is a valid JS literal; escape "</" so it cannot close the <script> tag.
    return (
        _SCRIPT.replace("__BLOCK_LIST__", json.dumps(BLOCK_LIST).replace("</", "<\\/"))
        .replace("__AD_SELECTORS__", json.dumps(AD_SELECTORS).replace("</", "<\\/"))
    )
