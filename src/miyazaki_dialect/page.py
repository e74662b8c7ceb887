from miyazaki_dialect.api_client import ROUTES
from miyazaki_dialect.kana import HIRAGANA, KATAKANA, KANJI_PLACEHOLDER
from miyazaki_dialect.request import Direction
from miyazaki_dialect.speech import SPEECH_LANG, SpeechOptions


def render_translator_html() -> str:
    defaults = SpeechOptions()
    return (
        PAGE_TEMPLATE
        .replace("__TO_STANDARD_URL__", ROUTES[Direction.TO_STANDARD])
        .replace("__TO_DIALECT_URL__", ROUTES[Direction.TO_DIALECT])
        .replace("__KATAKANA__", KATAKANA)
        .replace("__HIRAGANA__", HIRAGANA)
        .replace("__KANJI_PLACEHOLDER__", KANJI_PLACEHOLDER)
        .replace("__LANG__", SPEECH_LANG)
        .replace("__RATE__", str(defaults.rate))
        .replace("__PITCH__", str(defaults.pitch))
        .replace("__VOLUME__", str(defaults.volume))
    )


PAGE_TEMPLATE = """
<!DOCTYPE html>
<html lang="ja">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>宮崎弁翻訳</title>
  <style>
    :root {
      --bg: #eff6ff;
      --card: #ffffff;
      --text: #1f2937;
      --muted: #6b7280;
      --border: #e5e7eb;
      --danger: #dc2626;
      --radius: 12px;
      --font: system-ui, -apple-system, BlinkMacSystemFont, "Hiragino Sans", sans-serif;
    }
    * { box-sizing: border-box; }
    body {
      margin: 0;
      padding: 48px 16px;
      font-family: var(--font);
      background: linear-gradient(to bottom, var(--bg), #ffffff);
      color: var(--text);
    }
    .shell { max-width: 760px; margin: 0 auto; }
    header h1 { font-size: 32px; margin: 0 0 6px; }
    header p { color: var(--muted); margin: 0 0 32px; }
    .card {
      background: var(--card);
      border-radius: var(--radius);
      padding: 24px;
      box-shadow: 0 8px 24px rgba(15, 23, 42, 0.06);
    }
    .tabs { display: grid; grid-template-columns: 1fr 1fr; gap: 4px; margin-bottom: 24px; }
    .tabs button { padding: 8px; border: 1px solid var(--border); background: #f9fafb; border-radius: 8px; cursor: pointer; }
    .tabs button.active { background: #ffffff; font-weight: 600; }
    .row { display: flex; justify-content: space-between; align-items: center; margin-bottom: 8px; }
    label { font-size: 14px; font-weight: 500; }
    textarea {
      width: 100%;
      min-height: 120px;
      padding: 10px;
      border: 1px solid var(--border);
      border-radius: 8px;
      font-size: 15px;
      resize: vertical;
    }
    textarea.listening { border-color: #fca5a5; }
    button.small { padding: 4px 10px; border: 1px solid var(--border); border-radius: 6px; background: #fff; cursor: pointer; }
    button.small.listening { background: #fef2f2; color: var(--danger); border-color: #fecaca; }
    #submit {
      width: 100%;
      margin-top: 16px;
      padding: 10px;
      border: none;
      border-radius: 8px;
      background: #111827;
      color: #fff;
      font-size: 15px;
      cursor: pointer;
    }
    #submit:disabled { opacity: 0.5; cursor: not-allowed; }
    .hint { font-size: 12px; color: var(--muted); margin-top: 4px; }
    .error { color: var(--danger); font-size: 14px; margin-top: 8px; }
    .result { margin-top: 24px; }
    .result pre {
      white-space: pre-wrap;
      font-family: var(--font);
      padding: 16px;
      background: #f9fafb;
      border: 1px solid var(--border);
      border-radius: 8px;
      margin: 8px 0 0;
    }
    .hidden { display: none; }
    .notice { margin-top: 16px; padding: 12px; background: #fefce8; border: 1px solid #fef08a; border-radius: 8px; font-size: 14px; }
    footer { margin-top: 64px; text-align: center; font-size: 13px; color: var(--muted); }
  </style>
</head>
<body>
  <div class="shell">
    <header>
      <h1>宮崎弁翻訳</h1>
      <p>宮崎県の方言と標準的な日本語を相互に翻訳します</p>
    </header>

    <div class="card">
      <div class="tabs">
        <button id="tab-translate" class="active">翻訳</button>
        <button id="tab-about">使い方</button>
      </div>

      <section id="panel-translate">
        <div class="row">
          <label for="input" id="input-label">宮崎弁を入力してください</label>
          <div>
            <button class="small" id="direction">宮崎弁 → 標準語</button>
            <button class="small hidden" id="mic">音声入力</button>
          </div>
        </div>
        <textarea id="input" placeholder="宮崎弁を入力"></textarea>
        <p class="hint hidden" id="listening-hint">音声を認識中... マイクに向かって話してください（ひらがなで文字起こしします）</p>

        <button id="submit" disabled>翻訳する</button>
        <div class="error hidden" id="error"></div>

        <div class="result hidden" id="result">
          <div class="row">
            <label>翻訳結果:</label>
            <div class="hidden" id="speech-controls">
              <button class="small" id="speak">読み上げ</button>
              <button class="small" id="stop-speak">停止</button>
            </div>
          </div>
          <pre id="result-text"></pre>
        </div>
      </section>

      <section id="panel-about" class="hidden">
        <h3>宮崎弁翻訳について</h3>
        <p>このツールは、宮崎県の方言（宮崎弁）と標準的な日本語を相互に翻訳するためのものです。Gemini API を活用して、入力されたテキストを解析し変換します。</p>
        <h4>使い方</h4>
        <ol>
          <li>「翻訳」タブで翻訳の方向を選び、テキストを入力します
            <span class="hint mic-only hidden" style="display:block">または「音声入力」ボタンをクリックして、マイクで話すこともできます（ひらがなで文字起こしされます）</span>
          </li>
          <li>「翻訳する」ボタンをクリックします</li>
          <li>翻訳された結果が表示されます。「読み上げ」で音声再生できます</li>
        </ol>
        <p class="hint">※翻訳精度は完璧ではありません。文脈によっては正確に翻訳されない場合があります。</p>
        <div class="notice hidden" id="no-recognition">お使いのブラウザは音声認識機能をサポートしていません。Chrome、Edge、Safariなどの最新ブラウザをご利用ください。</div>
      </section>
    </div>

    <footer>宮崎弁翻訳 | Powered by Gemini API</footer>
  </div>

<script>
document.addEventListener('DOMContentLoaded', function () {
  var endpoints = { "to-standard": "__TO_STANDARD_URL__", "to-dialect": "__TO_DIALECT_URL__" };
  var labels = {
    "to-standard": { toggle: "宮崎弁 → 標準語", input: "宮崎弁を入力してください", placeholder: "宮崎弁を入力" },
    "to-dialect": { toggle: "標準語 → 宮崎弁", input: "標準語を入力してください", placeholder: "標準語を入力" }
  };
  var katakana = "__KATAKANA__";
  var hiragana = "__HIRAGANA__";

  var state = { direction: "to-standard", loading: false, listening: false, result: null };

  var inputEl = document.getElementById("input");
  var submitEl = document.getElementById("submit");
  var errorEl = document.getElementById("error");
  var resultEl = document.getElementById("result");
  var resultTextEl = document.getElementById("result-text");
  var micEl = document.getElementById("mic");
  var directionEl = document.getElementById("direction");

  function toHiragana(text) {
    var out = "";
    for (var i = 0; i < text.length; i++) {
      var idx = katakana.indexOf(text[i]);
      out += idx >= 0 ? hiragana[idx] : text[i];
    }
    return out.replace(/[\\u4E00-\\u9FFF]/g, "__KANJI_PLACEHOLDER__");
  }

  function showError(message) {
    errorEl.textContent = message || "";
    errorEl.classList.toggle("hidden", !message);
  }

  function render() {
    submitEl.disabled = state.loading || !inputEl.value.trim();
    submitEl.textContent = state.loading ? "翻訳中..." : "翻訳する";
    resultEl.classList.toggle("hidden", state.result === null);
    resultTextEl.textContent = state.result === null ? "" : state.result;
    micEl.textContent = state.listening ? "停止" : "音声入力";
    micEl.classList.toggle("listening", state.listening);
    inputEl.classList.toggle("listening", state.listening);
    document.getElementById("listening-hint").classList.toggle("hidden", !state.listening);
    var l = labels[state.direction];
    directionEl.textContent = l.toggle;
    document.getElementById("input-label").textContent = l.input;
    inputEl.placeholder = l.placeholder;
  }

  function translate() {
    var text = inputEl.value;
    if (!text.trim() || state.loading) return;
    state.loading = true;
    showError(null);
    render();
    fetch(endpoints[state.direction], {
      method: "POST",
      headers: { "Content-Type": "application/json" },
      body: JSON.stringify({ text: text })
    })
    .then(function (res) {
      if (!res.ok) throw new Error("翻訳中にエラーが発生しました");
      return res.json();
    })
    .then(function (data) { state.result = data.translatedText || ""; })
    .catch(function (e) {
      console.error(e);
      showError(e && e.message ? e.message : "翻訳中にエラーが発生しました");
    })
    .finally(function () {
      state.loading = false;
      render();
    });
  }

  function toggleDirection() {
    state.direction = state.direction === "to-standard" ? "to-dialect" : "to-standard";
    inputEl.value = "";
    state.result = null;
    showError(null);
    stopSpeaking();
    render();
  }

  // Speech recognition
  var Recognition = window.SpeechRecognition || window.webkitSpeechRecognition;
  var recognition = null;
  if (Recognition) {
    recognition = new Recognition();
    recognition.continuous = false;
    recognition.interimResults = true;
    recognition.lang = "__LANG__";
    recognition.onstart = function () { state.listening = true; showError(null); render(); };
    recognition.onend = function () { state.listening = false; render(); };
    recognition.onerror = function (event) {
      showError("音声認識エラー: " + event.error);
      state.listening = false;
      render();
    };
    recognition.onresult = function (event) {
      var transcript = event.results[event.resultIndex][0].transcript;
      if (transcript) inputEl.value += toHiragana(transcript);
      render();
    };
    micEl.classList.remove("hidden");
    document.querySelectorAll(".mic-only").forEach(function (el) { el.classList.remove("hidden"); });
  } else {
    document.getElementById("no-recognition").classList.remove("hidden");
  }

  function toggleListening() {
    if (!recognition) return;
    if (state.listening) {
      try { recognition.stop(); } catch (e) { console.error("音声認識の停止に失敗しました:", e); }
    } else {
      try { recognition.start(); } catch (e) {
        console.error("音声認識の開始に失敗しました:", e);
        showError("音声認識の開始に失敗しました");
      }
    }
  }

  // Speech synthesis
  var speechOptions = { rate: __RATE__, pitch: __PITCH__, volume: __VOLUME__, lang: "__LANG__", voice: null };

  function speak() {
    if (!window.speechSynthesis || !state.result) return;
    var utter = new SpeechSynthesisUtterance(state.result);
    utter.rate = speechOptions.rate;
    utter.pitch = speechOptions.pitch;
    utter.volume = speechOptions.volume;
    utter.lang = speechOptions.lang;
    if (speechOptions.voice) utter.voice = speechOptions.voice;
    window.speechSynthesis.speak(utter);
  }

  function stopSpeaking() {
    if (window.speechSynthesis) window.speechSynthesis.cancel();
  }

  if (window.speechSynthesis) {
    document.getElementById("speech-controls").classList.remove("hidden");
    window.speechSynthesis.getVoices();
  }

  function showTab(name) {
    document.getElementById("panel-translate").classList.toggle("hidden", name !== "translate");
    document.getElementById("panel-about").classList.toggle("hidden", name !== "about");
    document.getElementById("tab-translate").classList.toggle("active", name === "translate");
    document.getElementById("tab-about").classList.toggle("active", name === "about");
  }

  inputEl.addEventListener("input", render);
  submitEl.addEventListener("click", translate);
  directionEl.addEventListener("click", toggleDirection);
  micEl.addEventListener("click", toggleListening);
  document.getElementById("speak").addEventListener("click", speak);
  document.getElementById("stop-speak").addEventListener("click", stopSpeaking);
  document.getElementById("tab-translate").addEventListener("click", function () { showTab("translate"); });
  document.getElementById("tab-about").addEventListener("click", function () { showTab("about"); });

  render();
});
</script>
</body>
</html>
"""
