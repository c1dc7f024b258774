# Site: build artifacts (images, web-app manifest, SEO helpers, sitemap, build pipeline)
