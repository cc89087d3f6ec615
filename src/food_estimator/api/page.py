"""Browser form for the calorie and protein estimator."""

ESTIMATOR_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Food Calorie &amp; Protein Estimator</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; }
      main { max-width: 600px; margin: auto; padding: 20px; }
      button { margin-left: 10px; }
      .error { color: red; }
      #result { margin-top: 20px; }
    </style>
  </head>
  <body>
    <main>
      <h1>Food Calorie &amp; Protein Estimator</h1>
      <form id="estimator">
        <input type="file" name="image" accept="image/*" required />
        <button id="submit" type="submit">Analyze</button>
      </form>
      <p id="error" class="error" hidden></p>
      <div id="result" hidden>
        <h2>Result</h2>
        <p><strong>Food:</strong> <span id="food"></span>
          (confidence: <span id="score"></span>%)</p>
        <p><strong>Estimated Calories:</strong> <span id="calories"></span> kcal</p>
        <p><strong>Estimated Protein:</strong> <span id="protein"></span> g</p>
      </div>
    </main>
    <script>
      const form = document.getElementById('estimator');
      const submit = document.getElementById('submit');
      const errorBox = document.getElementById('error');
      const resultBox = document.getElementById('result');

      function showError(message) {
        errorBox.textContent = message;
        errorBox.hidden = false;
      }

      form.addEventListener('submit', async (event) => {
        event.preventDefault();
        resultBox.hidden = true;
        errorBox.hidden = true;
        const file = new FormData(form).get('image');
        if (!file || !file.size) {
          showError('Please select an image.');
          return;
        }
        submit.disabled = true;
        submit.textContent = 'Analyzing...';
        try {
          const res = await fetch('/api/analyze', {
            method: 'POST',
            headers: { 'Content-Type': 'application/octet-stream' },
            body: await file.arrayBuffer()
          });
          const text = await res.text();
          let data;
          try {
            data = JSON.parse(text);
          } catch (parseError) {
            throw new Error(text);
          }
          if (!res.ok) {
            throw new Error(data.error || text);
          }
          document.getElementById('food').textContent = data.food;
          document.getElementById('score').textContent = (data.score * 100).toFixed(2);
          document.getElementById('calories').textContent = data.calories;
          document.getElementById('protein').textContent = data.protein;
          resultBox.hidden = false;
        } catch (err) {
          showError(err.message || 'Something went wrong.');
        } finally {
          submit.disabled = false;
          submit.textContent = 'Analyze';
        }
      });
    </script>
  </body>
</html>
"""
